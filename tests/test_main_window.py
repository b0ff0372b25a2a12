import pytest
from PySide6.QtCore import QSettings

from src.core.models import Occurrence
from src.core.scan_session import ScanStatus
from src.ui.main_window import ChineseScannerApp
from src.utils.i18n import strings


class _CapturingLauncher:
    def __init__(self):
        self.calls = []

    def launch(self, request, on_success, on_failure):
        self.calls.append((request, on_success, on_failure))

    def succeed(self, occurrences):
        request, on_success, _ = self.calls[-1]
        on_success(request.request_id, list(occurrences))

    def fail(self, message):
        request, _, on_failure = self.calls[-1]
        on_failure(request.request_id, message)


OCCS = [
    Occurrence("/repo/a.ts", 1, 1, "你好"),
    Occurrence("/repo/b.ts", 2, 1, "世界"),
    Occurrence("/repo/a.ts", 5, 3, "测试"),
]


@pytest.fixture
def settings(tmp_path):
    return QSettings(str(tmp_path / "settings.ini"), QSettings.IniFormat)


@pytest.fixture
def window(qapp, settings):
    launcher = _CapturingLauncher()
    win = ChineseScannerApp(launcher=launcher, settings=settings)
    win.launcher = launcher
    yield win
    win.deleteLater()


def test_start_without_directory_shows_error(window):
    window.start_scan()

    assert window.launcher.calls == []
    assert window.lbl_error_banner.isHidden() is False
    assert "Please select a directory to scan." in window.lbl_error_banner.text()
    assert window.session_controller.status is ScanStatus.IDLE


def test_running_scan_disables_start_button(window):
    window.txt_scan_path.setText("/repo")
    window.start_scan()

    assert window.session_controller.session.scan_path == "/repo"
    assert window.btn_start_scan.isEnabled() is False
    assert window.btn_start_scan.text() == "Scanning..."
    assert window.lbl_results_empty.text() == "Loading results..."
    assert window.lbl_error_banner.isHidden() is True


def test_successful_scan_renders_expanded_groups(window):
    window.txt_scan_path.setText("/repo")
    window.start_scan()
    window.launcher.succeed(OCCS)

    assert window.btn_start_scan.isEnabled() is True
    assert window.btn_start_scan.text() == "Start scan"
    assert window.results_stack.currentWidget() is window.tree_widget
    assert window.tree_widget.group_paths() == ["/repo/a.ts", "/repo/b.ts"]
    assert window.tree_widget.expanded_paths() == ["/repo/a.ts", "/repo/b.ts"]
    assert window.lbl_results_meta.text() == "3 matches in 2 files"
    assert window.btn_export_csv.isEnabled() is True


def test_collapse_all_and_user_toggle_drive_controller(window):
    window.txt_scan_path.setText("/repo")
    window.start_scan()
    window.launcher.succeed(OCCS)

    window.collapse_all()
    assert window.tree_widget.expanded_paths() == []
    assert window.tree_widget.group_item("/repo/a.ts").childCount() == 0

    window.expand_all()
    window.tree_widget.itemCollapsed.emit(window.tree_widget.group_item("/repo/b.ts"))

    assert window.session_controller.is_expanded("/repo/b.ts") is False
    assert window.session_controller.is_expanded("/repo/a.ts") is True
    assert window.tree_widget.group_item("/repo/b.ts").childCount() == 0


def test_failed_scan_shows_message_and_empty_state(window):
    window.txt_scan_path.setText("/repo")
    window.start_scan()
    window.launcher.fail("disk read error")

    assert window.lbl_error_banner.isHidden() is False
    assert "disk read error" in window.lbl_error_banner.text()
    assert window.results_stack.currentWidget() is window.lbl_results_empty
    assert window.lbl_results_empty.text() == "No results."
    assert window.btn_expand_all.isEnabled() is False


def test_select_directory_uses_picker(window, monkeypatch):
    monkeypatch.setattr(window, "_pick_directory", lambda current: "/picked")

    window.select_directory()

    assert window.txt_scan_path.text() == "/picked"
    assert window.session_controller.session.scan_path == "/picked"


def test_settings_round_trip(qapp, settings):
    first = ChineseScannerApp(launcher=_CapturingLauncher(), settings=settings)
    first.txt_scan_path.setText("/repo")
    first.txt_exclude.setText("node_modules,dist")
    first.save_settings()
    first.deleteLater()

    second = ChineseScannerApp(launcher=_CapturingLauncher(), settings=settings)

    assert second.txt_scan_path.text() == "/repo"
    assert second.session_controller.session.exclude_patterns == "node_modules,dist"
    second.deleteLater()


def test_language_switch_retranslates(window):
    window.set_language("zh")

    assert strings.language == "zh"
    assert window.btn_start_scan.text() == "开始扫描"
    assert window.lbl_results_title.text() == "扫描结果"


def test_typing_a_path_hides_validation_banner(window):
    window.start_scan()
    assert window.lbl_error_banner.isHidden() is False

    window.txt_scan_path.setText("/repo")

    assert window.lbl_error_banner.isHidden() is True
