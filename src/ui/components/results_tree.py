from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QTreeWidget,
    QTreeWidgetItem,
)

from src.core.projection import FileGroupView
from src.ui.controllers.results_controller import ResultsController
from src.ui.theme import ModernTheme
from src.utils.i18n import strings


_ROLE_BASE = int(Qt.ItemDataRole.UserRole)
_ROLE_PATH = _ROLE_BASE
_ROLE_LINE = _ROLE_BASE + 1
_ROLE_COLUMN = _ROLE_BASE + 2


class ResultsTreeWidget(QTreeWidget):
    """
    Renders FileGroupView rows: one top-level item per file, one child per match.

    The widget keeps no expansion state of its own. User expand/collapse is
    reported through ``group_toggled`` and the tree follows whatever
    projection it is given next.
    """

    group_toggled = Signal(str)  # file path

    def __init__(self, parent=None):
        super().__init__(parent)
        self.results_controller = ResultsController()

        self.setColumnCount(2)
        self.retranslate()
        self.setColumnWidth(0, 420)

        header = self.header()
        header.setStretchLastSection(True)
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Interactive)

        self.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.setAlternatingRowColors(True)
        self.setIndentation(20)
        self.setAnimated(False)
        self.setUniformRowHeights(True)
        self.setTextElideMode(Qt.TextElideMode.ElideMiddle)

        self._group_items: Dict[str, QTreeWidgetItem] = {}
        self._group_order: List[str] = []
        self._suppress_toggle = False
        self.current_theme_mode = "dark"

        self.itemExpanded.connect(self._on_item_expanded)
        self.itemCollapsed.connect(self._on_item_collapsed)

    def retranslate(self) -> None:
        self.setHeaderLabels([strings.tr("col_location"), strings.tr("col_text")])

    def set_theme_mode(self, mode: str) -> None:
        self.current_theme_mode = mode
        for item in self._group_items.values():
            self._paint_group(item)

    def _paint_group(self, item: QTreeWidgetItem) -> None:
        colors = ModernTheme.get_palette(self.current_theme_mode)
        bg_brush = QBrush(QColor(colors["group_bg"]))
        fg_brush = QBrush(QColor(colors["group_fg"]))
        font = item.font(0)
        font.setBold(True)
        for col in range(2):
            item.setBackground(col, bg_brush)
            item.setForeground(col, fg_brush)
            item.setFont(col, font)

    def group_paths(self) -> List[str]:
        return list(self._group_order)

    def group_item(self, file_path: str) -> Optional[QTreeWidgetItem]:
        return self._group_items.get(file_path)

    def render(self, views: Sequence[FileGroupView], root: Optional[str] = None) -> None:
        """Bring the tree in line with ``views``; rebuilds only when the file set changed."""
        views = list(views or [])
        self._suppress_toggle = True
        try:
            paths = [v.file_path for v in views]
            if paths != self._group_order:
                self.clear()
                self._group_items = {}
                self._group_order = paths
                for view in views:
                    item = QTreeWidgetItem(self)
                    item.setData(0, _ROLE_PATH, view.file_path)
                    item.setChildIndicatorPolicy(QTreeWidgetItem.ChildIndicatorPolicy.ShowIndicator)
                    self._paint_group(item)
                    self._group_items[view.file_path] = item

            for view in views:
                self._fill_group(self._group_items[view.file_path], view, root)
        finally:
            self._suppress_toggle = False

    def _fill_group(self, item: QTreeWidgetItem, view: FileGroupView, root: Optional[str]) -> None:
        item.setText(0, self.results_controller.group_label(view, root))
        item.setToolTip(0, view.file_path)

        if not view.expanded:
            if item.childCount():
                item.takeChildren()
            item.setExpanded(False)
            return

        occurrences = view.occurrences or ()
        if item.childCount() != len(occurrences):
            item.takeChildren()
            for occ in occurrences:
                child = QTreeWidgetItem(item)
                child.setText(0, self.results_controller.location_label(occ))
                child.setToolTip(0, occ.location)
                child.setText(1, occ.text)
                child.setToolTip(1, occ.text)
                child.setData(0, _ROLE_PATH, occ.file_path)
                child.setData(0, _ROLE_LINE, int(occ.line))
                child.setData(0, _ROLE_COLUMN, int(occ.column))
        item.setExpanded(True)

    def expanded_paths(self) -> List[str]:
        return [p for p in self._group_order if self._group_items[p].isExpanded()]

    def _on_item_expanded(self, item: QTreeWidgetItem) -> None:
        self._emit_toggle(item)

    def _on_item_collapsed(self, item: QTreeWidgetItem) -> None:
        self._emit_toggle(item)

    def _emit_toggle(self, item: QTreeWidgetItem) -> None:
        if self._suppress_toggle or item.parent() is not None:
            return
        path = item.data(0, _ROLE_PATH)
        if path:
            self.group_toggled.emit(str(path))
