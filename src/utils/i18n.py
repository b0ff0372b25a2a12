from __future__ import annotations

import logging
from typing import Dict

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

_CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        "app_title": "Chinese Text Scanner",
        "app_subtitle": "Find Chinese text in JavaScript and TypeScript code",
        "lbl_scan_path": "Code directory",
        "ph_scan_path": "Select or enter the code directory to scan...",
        "btn_select": "Select",
        "lbl_exclude": "Exclude (comma separated)",
        "ph_exclude": "e.g. node_modules,dist",
        "btn_start_scan": "Start scan",
        "btn_scanning": "Scanning...",
        "hdr_results": "Scan results",
        "btn_expand_all": "Expand all",
        "btn_collapse_all": "Collapse all",
        "btn_export_csv": "Export CSV",
        "btn_export_json": "Export JSON",
        "col_location": "File / Location",
        "col_text": "Text",
        "msg_no_results": "No results.",
        "msg_loading_results": "Loading results...",
        "lbl_error": "Error:",
        "lbl_group_count": "{count} matches",
        "lbl_summary": "{occurrences} matches in {files} files",
        "status_ready": "Ready",
        "status_scanning": "Scanning: {count} files",
        "status_done": "Scan complete",
        "status_failed": "Scan failed",
        "err_critical_title": "Critical Error",
        "err_unexpected": "An unexpected error occurred",
        "err_no_directory": "Please select a directory to scan.",
        "err_picker_failed": "Failed to open directory dialog.",
        "err_scan_failed": "An error occurred during scan: {}",
        "err_export_failed": "Export failed: {}",
        "msg_export_done": "Exported {count} matches to {path}",
        "dlg_export_title": "Export results",
        "menu_view": "View",
        "action_theme_dark": "Dark theme",
        "action_theme_light": "Light theme",
        "menu_language": "Language",
    },
    "zh": {
        "app_title": "代码中文扫描工具",
        "app_subtitle": "扫描 JavaScript 与 TypeScript 代码中的中文文本",
        "lbl_scan_path": "代码目录",
        "ph_scan_path": "选择或输入要扫描的代码目录...",
        "btn_select": "选择",
        "lbl_exclude": "排除目录 (逗号分隔)",
        "ph_exclude": "例如: node_modules,dist",
        "btn_start_scan": "开始扫描",
        "btn_scanning": "扫描中...",
        "hdr_results": "扫描结果",
        "btn_expand_all": "全部展开",
        "btn_collapse_all": "全部折叠",
        "btn_export_csv": "导出 CSV",
        "btn_export_json": "导出 JSON",
        "col_location": "文件 / 位置",
        "col_text": "文本",
        "msg_no_results": "暂无结果。",
        "msg_loading_results": "正在加载结果...",
        "lbl_error": "错误:",
        "lbl_group_count": "{count} 处",
        "lbl_summary": "{files} 个文件中共 {occurrences} 处",
        "status_ready": "就绪",
        "status_scanning": "正在扫描: {count} 个文件",
        "status_done": "扫描完成",
        "status_failed": "扫描失败",
        "err_critical_title": "严重错误",
        "err_unexpected": "发生意外错误",
        "err_no_directory": "请选择要扫描的目录。",
        "err_picker_failed": "无法打开目录选择对话框。",
        "err_scan_failed": "扫描过程中发生错误: {}",
        "err_export_failed": "导出失败: {}",
        "msg_export_done": "已导出 {count} 处到 {path}",
        "dlg_export_title": "导出结果",
        "menu_view": "视图",
        "action_theme_dark": "深色主题",
        "action_theme_light": "浅色主题",
        "menu_language": "语言",
    },
}


class Strings:
    """Tiny translation table; missing keys fall back to English, then to the key itself."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self.language = DEFAULT_LANGUAGE
        self.set_language(language)

    @property
    def languages(self):
        return list(_CATALOG)

    def set_language(self, language: str) -> None:
        lang = str(language or "").strip().lower()
        if lang not in _CATALOG:
            logger.warning("Unsupported language %r, using %s", language, DEFAULT_LANGUAGE)
            lang = DEFAULT_LANGUAGE
        self.language = lang

    def tr(self, key: str) -> str:
        table = _CATALOG.get(self.language) or {}
        if key in table:
            return table[key]
        return _CATALOG[DEFAULT_LANGUAGE].get(key, key)


strings = Strings()
