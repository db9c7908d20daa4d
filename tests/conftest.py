import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so tests can import the local `appinit` package.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _clean_appinit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Developer shells may export these; tests opt in explicitly.
    for name in ("APPINIT_GO_BIN", "APPINIT_LOG_LEVEL", "APPINIT_FILE_MODE"):
        monkeypatch.delenv(name, raising=False)
