from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QPushButton,
    QLabel,
    QLineEdit,
)
from PySide6.QtCore import Qt

from src.utils.i18n import strings


def build_scan_page(window) -> QWidget:
    """
    Build the scan card (directory, exclusions, start button, error banner).

    Widgets are assigned onto the main window so its handlers can reach them
    as ``self.<widget>``.
    """
    page = QWidget()
    page.setObjectName("scan_card")
    layout = QVBoxLayout(page)
    layout.setSpacing(12)
    layout.setContentsMargins(20, 16, 20, 16)

    grid = QGridLayout()
    grid.setHorizontalSpacing(20)
    grid.setVerticalSpacing(6)

    # --- Directory ---
    window.lbl_scan_path = QLabel(strings.tr("lbl_scan_path"))
    window.lbl_scan_path.setObjectName("field_label")
    grid.addWidget(window.lbl_scan_path, 0, 0)

    path_row = QHBoxLayout()
    path_row.setSpacing(0)
    window.txt_scan_path = QLineEdit()
    window.txt_scan_path.setPlaceholderText(strings.tr("ph_scan_path"))
    window.txt_scan_path.setMinimumHeight(34)
    window.txt_scan_path.textChanged.connect(window.on_scan_path_edited)
    path_row.addWidget(window.txt_scan_path, 1)

    window.btn_select_dir = QPushButton(strings.tr("btn_select"))
    window.btn_select_dir.setMinimumHeight(34)
    window.btn_select_dir.setCursor(Qt.PointingHandCursor)
    window.btn_select_dir.clicked.connect(window.select_directory)
    path_row.addWidget(window.btn_select_dir)
    grid.addLayout(path_row, 1, 0)

    # --- Exclusions ---
    window.lbl_exclude = QLabel(strings.tr("lbl_exclude"))
    window.lbl_exclude.setObjectName("field_label")
    grid.addWidget(window.lbl_exclude, 0, 1)

    window.txt_exclude = QLineEdit()
    window.txt_exclude.setPlaceholderText(strings.tr("ph_exclude"))
    window.txt_exclude.setMinimumHeight(34)
    window.txt_exclude.textChanged.connect(window.on_exclude_edited)
    grid.addWidget(window.txt_exclude, 1, 1)

    grid.setColumnStretch(0, 2)
    grid.setColumnStretch(1, 1)
    layout.addLayout(grid)

    # --- Action ---
    action_row = QHBoxLayout()
    action_row.addStretch()
    window.btn_start_scan = QPushButton(strings.tr("btn_start_scan"))
    window.btn_start_scan.setObjectName("btn_primary")
    window.btn_start_scan.setMinimumHeight(40)
    window.btn_start_scan.setMinimumWidth(150)
    window.btn_start_scan.setCursor(Qt.PointingHandCursor)
    window.btn_start_scan.clicked.connect(window.start_scan)
    action_row.addWidget(window.btn_start_scan)
    action_row.addStretch()
    layout.addLayout(action_row)

    window.lbl_status = QLabel(strings.tr("status_ready"))
    window.lbl_status.setObjectName("status_line")
    window.lbl_status.setAlignment(Qt.AlignCenter)
    layout.addWidget(window.lbl_status)

    # --- Error banner ---
    window.lbl_error_banner = QLabel("")
    window.lbl_error_banner.setObjectName("error_banner")
    window.lbl_error_banner.setWordWrap(True)
    window.lbl_error_banner.setTextInteractionFlags(Qt.TextSelectableByMouse)
    window.lbl_error_banner.hide()
    layout.addWidget(window.lbl_error_banner)

    return page
