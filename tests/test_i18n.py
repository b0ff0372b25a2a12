from src.utils.i18n import Strings, _CATALOG, strings


def test_languages():
    assert set(strings.languages) == {"en", "zh"}


def test_chinese_catalog_covers_every_english_key():
    assert set(_CATALOG["zh"]) == set(_CATALOG["en"])


def test_error_messages():
    assert strings.tr("err_no_directory") == "Please select a directory to scan."
    assert strings.tr("err_picker_failed") == "Failed to open directory dialog."
    assert strings.tr("err_scan_failed").format("boom") == "An error occurred during scan: boom"


def test_switch_language():
    local = Strings("zh")
    assert local.tr("btn_start_scan") == "开始扫描"
    local.set_language("en")
    assert local.tr("btn_start_scan") == "Start scan"


def test_unknown_language_falls_back_to_english():
    local = Strings("fr")
    assert local.language == "en"


def test_unknown_key_returns_key():
    assert strings.tr("no_such_key") == "no_such_key"
