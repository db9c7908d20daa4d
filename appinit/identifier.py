"""Module path -> application id / name.

A module path such as ``github.com/acme/widgets`` maps to the reverse-domain
id ``com.github.acme.widgets`` and the name ``widgets``. No validation is
done: the results are suggestions for a human to review.
"""

from __future__ import annotations


def derive_app_id(module_path: str) -> str:
    parts = module_path.split("/")
    if not parts:
        return ""

    labels = parts[0].split(".")
    out = [""] * (len(labels) + len(parts) - 1)
    for n, label in enumerate(labels):
        out[len(labels) - n - 1] = label
    for n, seg in enumerate(parts):
        if n == 0:
            continue
        out[len(labels) + n - 1] = seg

    return ".".join(out)


def derive_app_name(module_path: str) -> str:
    parts = module_path.split("/")
    if not parts:
        return ""

    if len(parts) > 1:
        return parts[-1]

    return parts[0].split(".")[0]
