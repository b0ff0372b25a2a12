import os
import sys

import pytest

# Ensure the repo root is importable so `import src.*` works in all tests.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from src.utils.i18n import strings  # noqa: E402


@pytest.fixture(autouse=True)
def _english_strings():
    strings.set_language("en")
    yield
    strings.set_language("en")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
