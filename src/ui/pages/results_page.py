from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QPushButton,
    QLabel,
    QStackedWidget,
)
from PySide6.QtCore import Qt

from src.utils.i18n import strings
from src.ui.components.results_tree import ResultsTreeWidget


def build_results_page(window) -> QWidget:
    """
    Build the results section (header, expand/collapse/export, tree + empty state).

    Assigns widgets to the main window instance.
    """
    page = QWidget()
    layout = QVBoxLayout(page)
    layout.setSpacing(8)
    layout.setContentsMargins(0, 12, 0, 0)

    # Header
    header = QHBoxLayout()
    header.setSpacing(8)
    window.lbl_results_title = QLabel(strings.tr("hdr_results"))
    window.lbl_results_title.setObjectName("section_header")
    header.addWidget(window.lbl_results_title)

    window.lbl_results_meta = QLabel("")
    window.lbl_results_meta.setObjectName("results_meta")
    header.addWidget(window.lbl_results_meta)
    header.addStretch()

    window.btn_expand_all = QPushButton(strings.tr("btn_expand_all"))
    window.btn_expand_all.setObjectName("btn_secondary")
    window.btn_expand_all.setCursor(Qt.PointingHandCursor)
    window.btn_expand_all.clicked.connect(window.expand_all)
    header.addWidget(window.btn_expand_all)

    window.btn_collapse_all = QPushButton(strings.tr("btn_collapse_all"))
    window.btn_collapse_all.setObjectName("btn_secondary")
    window.btn_collapse_all.setCursor(Qt.PointingHandCursor)
    window.btn_collapse_all.clicked.connect(window.collapse_all)
    header.addWidget(window.btn_collapse_all)

    window.btn_export_csv = QPushButton(strings.tr("btn_export_csv"))
    window.btn_export_csv.setObjectName("btn_secondary")
    window.btn_export_csv.setCursor(Qt.PointingHandCursor)
    window.btn_export_csv.clicked.connect(window.export_results_csv)
    header.addWidget(window.btn_export_csv)

    window.btn_export_json = QPushButton(strings.tr("btn_export_json"))
    window.btn_export_json.setObjectName("btn_secondary")
    window.btn_export_json.setCursor(Qt.PointingHandCursor)
    window.btn_export_json.clicked.connect(window.export_results_json)
    header.addWidget(window.btn_export_json)
    layout.addLayout(header)

    # Tree widget + empty stack
    window.tree_widget = ResultsTreeWidget()
    window.tree_widget.group_toggled.connect(window.on_group_toggled)

    window.results_stack = QStackedWidget()
    window.results_stack.setObjectName("results_stack")

    window.lbl_results_empty = QLabel(strings.tr("msg_no_results"))
    window.lbl_results_empty.setAlignment(Qt.AlignCenter)
    window.lbl_results_empty.setWordWrap(True)
    window.lbl_results_empty.setObjectName("empty_state")

    window.results_stack.addWidget(window.lbl_results_empty)
    window.results_stack.addWidget(window.tree_widget)
    layout.addWidget(window.results_stack, 1)

    return page
