"""
Locate Chinese text in JavaScript / TypeScript sources.

Sources are parsed with Tree-sitter. Only text a user would see is reported:
string literals, template literal chunks and JSX text (plus JSX attribute
strings). Comments, regular expression literals and identifiers are never
visited. A file whose syntax tree contains errors raises ``ParseError`` so the
caller can skip it.
"""

from __future__ import annotations

import bisect
import functools
import re
from dataclasses import dataclass
from typing import Any, List, Tuple

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

CHINESE_PATTERN = re.compile(r"[\u4e00-\u9fa5]")

# Grammar per dialect; the JavaScript grammar parses JSX as well.
DIALECTS = {
    "javascript": tree_sitter_javascript.language,
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}

_ESCAPE_PATTERN = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_LINE_CONTINUATIONS = frozenset({"\r\n", "\n", "\r", "\u2028", "\u2029"})


class ParseError(ValueError):
    pass


@dataclass(frozen=True)
class TextMatch:
    start_byte: int
    line: int
    column: int
    text: str
    kind: str  # string | template | jsx_text


def contains_chinese(text: str) -> bool:
    return bool(text) and CHINESE_PATTERN.search(text) is not None


@functools.lru_cache(maxsize=None)
def _load_language(dialect: str) -> tree_sitter.Language:
    try:
        loader = DIALECTS[dialect]
    except KeyError:
        raise ValueError(f"unknown dialect: {dialect!r}") from None
    lang_obj = loader()
    if isinstance(lang_obj, tree_sitter.Language):
        return lang_obj
    return tree_sitter.Language(lang_obj)


def _replace_escape(match) -> str:
    body = match.group(1)
    if body in _LINE_CONTINUATIONS:
        return ""
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body[0] in "ux" and len(body) > 1:
        digits = body[2:-1] if body.startswith("u{") else body[1:]
        try:
            return chr(int(digits, 16))
        except (ValueError, OverflowError):
            return match.group(0)
    return body


def cook(raw: str) -> str:
    """Decode JS escape sequences in a literal's raw text."""
    if "\\" not in raw:
        return raw
    value = _ESCAPE_PATTERN.sub(_replace_escape, raw)
    # Rejoin escaped surrogate pairs such as "\ud83d\ude00".
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


def find_chinese_text(source: str, *, dialect: str = "javascript") -> List[TextMatch]:
    """Return every literal / JSX text containing Chinese, in source order."""
    if not source or not contains_chinese(source):
        return []

    data = source.encode("utf-8")
    parser = tree_sitter.Parser(_load_language(dialect))
    tree = parser.parse(data)
    if tree.root_node.has_error:
        raise ParseError(f"syntax error in {dialect} source")

    found = _collect(tree.root_node, data)
    found.sort(key=lambda item: item[0])

    line_starts = [0]
    for idx, byte in enumerate(data):
        if byte == 0x0A:
            line_starts.append(idx + 1)

    matches: List[TextMatch] = []
    for start_byte, text, kind in found:
        line = bisect.bisect_right(line_starts, start_byte)
        line_start = line_starts[line - 1]
        column = len(data[line_start:start_byte].decode("utf-8")) + 1
        matches.append(TextMatch(start_byte=start_byte, line=line, column=column, text=text, kind=kind))
    return matches


def _collect(root: Any, data: bytes) -> List[Tuple[int, str, str]]:
    found: List[Tuple[int, str, str]] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "string":
            _record_string(node, data, found)
            continue
        if node.type == "template_string":
            _record_template(node, data, found)
            # Substitutions can hold more literals.
            stack.extend(c for c in node.children if c.type == "template_substitution")
            continue
        if node.type == "jsx_text":
            _record_span(data, node.start_byte, node.end_byte, found, kind="jsx_text", strip=True)
            continue
        stack.extend(reversed(node.children))
    return found


def _first_chinese_byte(data: bytes, start: int, end: int):
    raw = data[start:end].decode("utf-8")
    m = CHINESE_PATTERN.search(raw)
    if m is None:
        return None, raw
    return start + len(raw[: m.start()].encode("utf-8")), raw


def _record_span(data: bytes, start: int, end: int, found, *, kind: str, strip: bool = False) -> None:
    offset, raw = _first_chinese_byte(data, start, end)
    if offset is not None:
        found.append((offset, raw.strip() if strip else raw, kind))


def _record_string(node: Any, data: bytes, found) -> None:
    start, end = node.start_byte + 1, node.end_byte - 1
    if end < start:
        return
    if node.parent is not None and node.parent.type == "jsx_attribute":
        # JSX attribute values have no escapes.
        _record_span(data, start, end, found, kind="string")
        return

    offset, raw = _first_chinese_byte(data, start, end)
    value = cook(raw)
    if contains_chinese(value):
        found.append((start if offset is None else offset, value, "string"))


def _record_template(node: Any, data: bytes, found) -> None:
    chunk_start = node.start_byte + 1
    for child in node.children:
        if child.type == "template_substitution":
            _record_quasi(data, chunk_start, child.start_byte, found)
            chunk_start = child.end_byte
    _record_quasi(data, chunk_start, node.end_byte - 1, found)


def _record_quasi(data: bytes, start: int, end: int, found) -> None:
    if end <= start:
        return
    offset, raw = _first_chinese_byte(data, start, end)
    value = cook(raw)
    if contains_chinese(value):
        found.append((start if offset is None else offset, value, "template"))
