class ModernTheme:
    """
    Centralized theme management for the application.
    Dark is the default; the light palette mirrors it key for key.
    """

    DARK_PALETTE = {
        # Base colors
        "bg": "#111827",
        "fg": "#f9fafb",
        "panel": "#1f2937",
        "border": "#374151",

        # Accent colors - cyan for navigation, green for the scan action
        "primary": "#0891b2",
        "primary_hover": "#0e7490",
        "accent_text": "#22d3ee",
        "success": "#16a34a",
        "success_hover": "#15803d",

        # Error banner
        "danger_bg": "#7f1d1d",
        "danger_border": "#b91c1c",
        "danger_text": "#fecaca",

        # Text
        "text_primary": "#f9fafb",
        "text_secondary": "#9ca3af",
        "text_tertiary": "#6b7280",

        # Components
        "input_bg": "#374151",
        "input_border": "#4b5563",
        "input_focus": "#06b6d4",
        "hover": "#1f2937",

        # Tree
        "tree_bg": "#111827",
        "group_bg": "#1f2937",
        "group_fg": "#22d3ee",
        "row_alt": "#18212f",
        "match_bg": "#374151",
    }

    LIGHT_PALETTE = {
        # Base colors
        "bg": "#f8f9fa",
        "fg": "#1a1a2e",
        "panel": "#ffffff",
        "border": "#e1e4e8",

        # Accent colors
        "primary": "#0891b2",
        "primary_hover": "#0e7490",
        "accent_text": "#0e7490",
        "success": "#16a34a",
        "success_hover": "#15803d",

        # Error banner
        "danger_bg": "#fee2e2",
        "danger_border": "#fca5a5",
        "danger_text": "#991b1b",

        # Text
        "text_primary": "#1a1a2e",
        "text_secondary": "#6b7280",
        "text_tertiary": "#9ca3af",

        # Components
        "input_bg": "#ffffff",
        "input_border": "#d1d5db",
        "input_focus": "#0891b2",
        "hover": "#f3f4f6",

        # Tree
        "tree_bg": "#ffffff",
        "group_bg": "#ecfeff",
        "group_fg": "#155e75",
        "row_alt": "#fafbfc",
        "match_bg": "#f3f4f6",
    }

    @staticmethod
    def get_palette(mode="dark"):
        return ModernTheme.LIGHT_PALETTE if mode == "light" else ModernTheme.DARK_PALETTE

    @staticmethod
    def get_stylesheet(mode="dark"):
        c = ModernTheme.get_palette(mode)

        return f"""
            /* ==================== GLOBAL ==================== */
            QMainWindow, QDialog {{
                background-color: {c['bg']};
                color: {c['fg']};
            }}

            QWidget {{
                font-family: 'Segoe UI', 'Microsoft YaHei', 'PingFang SC', -apple-system, sans-serif;
                font-size: 14px;
                color: {c['text_primary']};
            }}

            QLabel {{
                background: transparent;
            }}

            QLabel#app_title {{
                font-size: 30px;
                font-weight: 700;
                color: {c['accent_text']};
            }}

            QLabel#app_subtitle, QLabel#results_meta, QLabel#status_line {{
                color: {c['text_secondary']};
            }}

            QLabel#section_header {{
                font-size: 20px;
                font-weight: 600;
            }}

            QLabel#field_label {{
                color: {c['text_secondary']};
                font-size: 13px;
            }}

            QLabel#empty_state {{
                color: {c['text_tertiary']};
                padding: 32px;
            }}

            /* ==================== CARD ==================== */
            QWidget#scan_card {{
                background-color: {c['panel']};
                border-radius: 10px;
            }}

            /* ==================== INPUTS ==================== */
            QLineEdit {{
                background-color: {c['input_bg']};
                border: 1px solid {c['input_border']};
                border-radius: 6px;
                padding: 8px;
            }}
            QLineEdit:focus {{
                border-color: {c['input_focus']};
            }}

            /* ==================== BUTTONS ==================== */
            QPushButton {{
                background-color: {c['primary']};
                border: none;
                border-radius: 6px;
                padding: 8px 16px;
                color: #ffffff;
                font-weight: 600;
            }}
            QPushButton:hover {{
                background-color: {c['primary_hover']};
            }}
            QPushButton:disabled {{
                background-color: {c['text_tertiary']};
                color: {c['border']};
            }}

            QPushButton#btn_primary {{
                background-color: {c['success']};
                padding: 10px 28px;
            }}
            QPushButton#btn_primary:hover {{
                background-color: {c['success_hover']};
            }}
            QPushButton#btn_primary:disabled {{
                background-color: {c['text_tertiary']};
            }}

            QPushButton#btn_secondary {{
                background-color: transparent;
                border: 1px solid {c['border']};
                color: {c['text_secondary']};
                padding: 6px 12px;
            }}
            QPushButton#btn_secondary:hover {{
                background-color: {c['hover']};
                color: {c['text_primary']};
            }}

            /* ==================== ERROR BANNER ==================== */
            QLabel#error_banner {{
                background-color: {c['danger_bg']};
                border: 1px solid {c['danger_border']};
                border-radius: 6px;
                color: {c['danger_text']};
                padding: 12px;
            }}

            /* ==================== TREE ==================== */
            QTreeWidget {{
                background-color: {c['tree_bg']};
                alternate-background-color: {c['row_alt']};
                border: 1px solid {c['border']};
                border-radius: 8px;
            }}
            QTreeWidget::item {{
                padding: 4px 2px;
            }}
            QTreeWidget::item:hover {{
                background-color: {c['hover']};
            }}
            QHeaderView::section {{
                background-color: {c['panel']};
                color: {c['text_secondary']};
                border: none;
                border-bottom: 1px solid {c['border']};
                padding: 6px;
            }}
        """
