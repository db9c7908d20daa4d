from __future__ import annotations

ENTRY_POINT_FILE = "main.go"
MODULE_DESCRIPTOR_FILE = "go.mod"
METADATA_FILE = "FyneApp.toml"

DEFAULT_ICON = "Icon.png"
DEFAULT_VERSION = "0.0.1"
DEFAULT_BUILD = 1

_MAIN_GO = """package main

import (
\t"fyne.io/fyne/v2/app"
\t"fyne.io/fyne/v2/widget"
)

func main() {{
\ta := app.NewWithID({app_id})
\tw := a.NewWindow("Hello World")

\tw.SetContent(widget.NewLabel("Hello World!"))
\tw.ShowAndRun()
}}
"""

_FYNE_APP_TOML = """[Details]
Icon = {icon}
Name = {name}
ID = {app_id}
Version = {version}
Build = {build}
"""

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Go-only escapes; TOML has no \a or \v.
_GO_ESCAPES = {**_ESCAPES, "\a": "\\a", "\v": "\\v"}


def _is_surrogate(ch: str) -> bool:
    return 0xD800 <= ord(ch) <= 0xDFFF


def _unicode_escape(ch: str) -> str:
    cp = ord(ch)
    return f"\\u{cp:04x}" if cp <= 0xFFFF else f"\\U{cp:08x}"


def quote(s: str) -> str:
    """Double-quote ``s`` as a Go string literal, the way ``%q`` does.

    Non-printable runes become ``\\u``/``\\U`` escapes. Undecodable bytes
    smuggled in through ``os.fsdecode`` (U+DC80..U+DCFF) become ``\\xNN``.
    """
    out: list[str] = []
    for ch in s:
        esc = _GO_ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
        elif 0xDC80 <= ord(ch) <= 0xDCFF:
            out.append(f"\\x{ord(ch) - 0xDC00:02x}")
        elif _is_surrogate(ch):
            out.append("\\ufffd")
        elif not ch.isprintable():
            out.append(_unicode_escape(ch))
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def quote_toml(s: str) -> str:
    """Double-quote ``s`` as a TOML basic string.

    Same as :func:`quote` except that TOML has no ``\\x``, ``\\a`` or ``\\v``
    escapes: control runes use ``\\u`` and lone surrogates become U+FFFD.
    """
    out: list[str] = []
    for ch in s:
        esc = _ESCAPES.get(ch)
        if esc is not None:
            out.append(esc)
        elif _is_surrogate(ch):
            out.append("\\ufffd")
        elif not ch.isprintable():
            out.append(_unicode_escape(ch))
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def render_main_go(app_id: str) -> str:
    return _MAIN_GO.format(app_id=quote(app_id))


def render_fyne_app_toml(app_name: str, app_id: str) -> str:
    return _FYNE_APP_TOML.format(
        icon=quote_toml(DEFAULT_ICON),
        name=quote_toml(app_name),
        app_id=quote_toml(app_id),
        version=quote_toml(DEFAULT_VERSION),
        build=DEFAULT_BUILD,
    )
