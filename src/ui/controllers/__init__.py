# Controllers keep scan orchestration and result formatting out of main_window.

from .results_controller import ResultsController
from .scan_controller import ScanController

__all__ = [
    "ResultsController",
    "ScanController",
]
