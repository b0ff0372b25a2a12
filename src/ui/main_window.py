from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel, QFileDialog, QMessageBox
from PySide6.QtCore import Qt, Slot, QSettings
from PySide6.QtGui import QAction, QActionGroup

import logging
import os

from src.core.scan_session import ScanSessionController, ScanStatus
from src.ui.controllers.results_controller import ResultsController
from src.ui.controllers.scan_controller import ScanController
from src.ui.exporting import export_occurrences_csv, export_occurrences_json
from src.ui.pages.scan_page import build_scan_page
from src.ui.pages.results_page import build_results_page
from src.ui.theme import ModernTheme
from src.utils.i18n import strings

logger = logging.getLogger(__name__)

SETTINGS_ORG = "ChineseScanner"
SETTINGS_APP = "ChineseTextScanner"


class ChineseScannerApp(QMainWindow):
    def __init__(self, launcher=None, settings=None):
        super().__init__()
        self.settings = settings if settings is not None else QSettings(SETTINGS_ORG, SETTINGS_APP)
        strings.set_language(self.settings.value("app/language", "en"))
        self.current_theme = str(self.settings.value("app/theme", "dark") or "dark")

        self.setWindowTitle(strings.tr("app_title"))
        self.resize(1000, 820)

        self.scan_controller = launcher if launcher is not None else ScanController(self)
        self.results_controller = ResultsController()
        self.session_controller = ScanSessionController(
            self.scan_controller,
            scan_path=str(self.settings.value("scan/path", "") or ""),
            exclude_patterns=str(self.settings.value("scan/exclude", "") or ""),
            parent=self,
        )

        self.init_ui()
        self.create_menus()

        self.session_controller.session_changed.connect(self.on_session_changed)
        self.session_controller.error_raised.connect(self.on_error_raised)
        if hasattr(self.scan_controller, "progress_updated"):
            self.scan_controller.progress_updated.connect(self.update_progress)

        session = self.session_controller.session
        self.txt_scan_path.setText(session.scan_path)
        self.txt_exclude.setText(session.exclude_patterns)

        geometry = self.settings.value("window/geometry")
        if geometry is not None:
            self.restoreGeometry(geometry)

        self.apply_theme(self.current_theme)
        self.refresh_view()

    def init_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(12)

        self.lbl_app_title = QLabel(strings.tr("app_title"))
        self.lbl_app_title.setObjectName("app_title")
        self.lbl_app_title.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.lbl_app_title)

        self.lbl_app_subtitle = QLabel(strings.tr("app_subtitle"))
        self.lbl_app_subtitle.setObjectName("app_subtitle")
        self.lbl_app_subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.lbl_app_subtitle)

        layout.addWidget(build_scan_page(self))
        layout.addWidget(build_results_page(self), 1)
        self.setCentralWidget(central)

    def create_menus(self):
        menu_bar = self.menuBar()

        self.menu_view = menu_bar.addMenu("")
        self.theme_group = QActionGroup(self)
        self.action_theme_dark = QAction("", self, checkable=True)
        self.action_theme_light = QAction("", self, checkable=True)
        for action, mode in ((self.action_theme_dark, "dark"), (self.action_theme_light, "light")):
            action.setChecked(self.current_theme == mode)
            action.triggered.connect(lambda checked, m=mode: self.apply_theme(m))
            self.theme_group.addAction(action)
            self.menu_view.addAction(action)

        self.menu_language = menu_bar.addMenu("")
        self.language_group = QActionGroup(self)
        self.language_actions = {}
        for lang, label in (("en", "English"), ("zh", "中文")):
            action = QAction(label, self, checkable=True)
            action.setChecked(strings.language == lang)
            action.triggered.connect(lambda checked, code=lang: self.set_language(code))
            self.language_group.addAction(action)
            self.menu_language.addAction(action)
            self.language_actions[lang] = action

        self._retranslate_menus()

    def _retranslate_menus(self):
        self.menu_view.setTitle(strings.tr("menu_view"))
        self.action_theme_dark.setText(strings.tr("action_theme_dark"))
        self.action_theme_light.setText(strings.tr("action_theme_light"))
        self.menu_language.setTitle(strings.tr("menu_language"))

    # --- settings / appearance ---

    def closeEvent(self, event):
        if self.session_controller.session.is_running and hasattr(self.scan_controller, "wait"):
            # No cancellation: let the worker thread finish before Qt tears it down.
            self.scan_controller.wait()
        self.save_settings()
        event.accept()

    def save_settings(self):
        session = self.session_controller.session
        self.settings.setValue("scan/path", session.scan_path)
        self.settings.setValue("scan/exclude", session.exclude_patterns)
        self.settings.setValue("app/language", strings.language)
        self.settings.setValue("app/theme", self.current_theme)
        self.settings.setValue("window/geometry", self.saveGeometry())

    def apply_theme(self, mode):
        self.current_theme = "light" if mode == "light" else "dark"
        self.setStyleSheet(ModernTheme.get_stylesheet(self.current_theme))
        self.tree_widget.set_theme_mode(self.current_theme)

    def set_language(self, lang):
        strings.set_language(lang)
        self.retranslate_ui()

    def retranslate_ui(self):
        self.setWindowTitle(strings.tr("app_title"))
        self.lbl_app_title.setText(strings.tr("app_title"))
        self.lbl_app_subtitle.setText(strings.tr("app_subtitle"))
        self.lbl_scan_path.setText(strings.tr("lbl_scan_path"))
        self.txt_scan_path.setPlaceholderText(strings.tr("ph_scan_path"))
        self.btn_select_dir.setText(strings.tr("btn_select"))
        self.lbl_exclude.setText(strings.tr("lbl_exclude"))
        self.txt_exclude.setPlaceholderText(strings.tr("ph_exclude"))
        self.lbl_results_title.setText(strings.tr("hdr_results"))
        self.btn_expand_all.setText(strings.tr("btn_expand_all"))
        self.btn_collapse_all.setText(strings.tr("btn_collapse_all"))
        self.btn_export_csv.setText(strings.tr("btn_export_csv"))
        self.btn_export_json.setText(strings.tr("btn_export_json"))
        self.tree_widget.retranslate()
        if hasattr(self, "menu_view"):
            self._retranslate_menus()
        self.refresh_view()

    # --- inputs ---

    @Slot(str)
    def on_scan_path_edited(self, text):
        self.session_controller.set_scan_path(text)

    @Slot(str)
    def on_exclude_edited(self, text):
        self.session_controller.set_exclude_patterns(text)

    def _pick_directory(self, current_path):
        start_dir = current_path if current_path and os.path.isdir(current_path) else ""
        return QFileDialog.getExistingDirectory(self, strings.tr("lbl_scan_path"), start_dir)

    def select_directory(self):
        selected = self.session_controller.select_directory(self._pick_directory)
        if selected:
            self.txt_scan_path.setText(selected)

    def start_scan(self):
        self.session_controller.start_scan()

    # --- results ---

    @Slot(str)
    def on_group_toggled(self, file_path):
        self.session_controller.toggle(file_path)

    def expand_all(self):
        self.session_controller.expand_all()

    def collapse_all(self):
        self.session_controller.collapse_all()

    def _export(self, suffix, writer):
        session = self.session_controller.session
        if not session.results:
            return
        out_path, _ = QFileDialog.getSaveFileName(
            self,
            strings.tr("dlg_export_title"),
            f"chinese-text.{suffix}",
            f"{suffix.upper()} (*.{suffix})",
        )
        if not out_path:
            return
        try:
            count = writer(session, out_path)
        except OSError as e:
            logger.exception("Export to %s failed", out_path)
            QMessageBox.critical(self, strings.tr("app_title"), strings.tr("err_export_failed").format(e))
            return
        self.lbl_status.setText(strings.tr("msg_export_done").format(count=count, path=out_path))

    def export_results_csv(self):
        self._export("csv", lambda s, p: export_occurrences_csv(occurrences=s.results, out_path=p))

    def export_results_json(self):
        self._export(
            "json",
            lambda s, p: export_occurrences_json(
                occurrences=s.results, out_path=p, path=s.scan_path, exclude=s.exclude_patterns
            ),
        )

    # --- rendering ---

    @Slot(object)
    def on_session_changed(self, _session):
        self.refresh_view()

    @Slot(str)
    def on_error_raised(self, _message):
        self.refresh_view()

    @Slot(int, str)
    def update_progress(self, _value, message):
        if self.session_controller.session.is_running:
            self.lbl_status.setText(message)

    def refresh_view(self):
        controller = self.session_controller
        session = controller.session
        running = session.is_running

        self.btn_start_scan.setEnabled(not running)
        self.btn_start_scan.setText(strings.tr("btn_scanning") if running else strings.tr("btn_start_scan"))

        if session.status is ScanStatus.SUCCEEDED:
            self.lbl_status.setText(strings.tr("status_done"))
        elif session.status is ScanStatus.FAILED:
            self.lbl_status.setText(strings.tr("status_failed"))
        elif session.status is ScanStatus.IDLE:
            self.lbl_status.setText(strings.tr("status_ready"))

        error = controller.display_error()
        if error:
            self.lbl_error_banner.setText(f"<b>{strings.tr('lbl_error')}</b> {error}")
            self.lbl_error_banner.show()
        else:
            self.lbl_error_banner.clear()
            self.lbl_error_banner.hide()

        views = controller.projection()
        self.tree_widget.render(views, root=session.scan_path)
        self.lbl_results_meta.setText(self.results_controller.summary_text(views))
        self.lbl_results_empty.setText(
            strings.tr("msg_loading_results") if running else strings.tr("msg_no_results")
        )
        self.results_stack.setCurrentWidget(self.tree_widget if views else self.lbl_results_empty)

        has_results = bool(views)
        self.btn_expand_all.setEnabled(has_results)
        self.btn_collapse_all.setEnabled(has_results)
        self.btn_export_csv.setEnabled(has_results and not running)
        self.btn_export_json.setEnabled(has_results and not running)
