import sys
from pathlib import Path

import pytest

# Ensure project root is on path for uninstalled runs
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from refcrypto.config import load_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def h(s: str) -> bytes:
    return bytes.fromhex("".join(s.split()))
