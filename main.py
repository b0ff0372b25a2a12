import sys
import logging
import platform
from PySide6.QtWidgets import QApplication
from src.ui.main_window import ChineseScannerApp
from src.utils.i18n import strings


def _ui_font_family():
    system = platform.system()
    if system == "Windows":
        return "Microsoft YaHei"
    if system == "Darwin":
        return "PingFang SC"
    return "Noto Sans CJK SC"


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)

    font = app.font()
    font.setFamily(_ui_font_family())
    font.setPointSize(10)
    app.setFont(font)

    def exception_hook(exctype, value, traceback):
        from PySide6.QtWidgets import QMessageBox
        import traceback as tb
        error_msg = "".join(tb.format_exception(exctype, value, traceback))
        print(error_msg, file=sys.stderr)
        QMessageBox.critical(None, strings.tr("err_critical_title"), f"{strings.tr('err_unexpected')}:\n{value}")
        sys.exit(1)

    sys.excepthook = exception_hook

    window = ChineseScannerApp()
    window.show()
    sys.exit(app.exec())
