from collections import Counter

from src.core.grouping import group_occurrences
from src.core.models import Occurrence


def _occ(path, line, column, text):
    return Occurrence(file_path=path, line=line, column=column, text=text)


def test_groups_by_path_in_first_seen_order():
    occs = [
        _occ("a.ts", 1, 1, "你好"),
        _occ("b.ts", 2, 1, "世界"),
        _occ("a.ts", 5, 3, "测试"),
    ]

    grouping = group_occurrences(occs)

    assert list(grouping) == ["a.ts", "b.ts"]
    assert grouping["a.ts"] == [occs[0], occs[2]]
    assert grouping["b.ts"] == [occs[1]]


def test_grouping_is_a_partition_of_the_input():
    occs = [
        _occ("z.tsx", 9, 1, "一"),
        _occ("a.ts", 3, 2, "二"),
        _occ("z.tsx", 1, 1, "三"),
        _occ("a.ts", 3, 2, "二"),
        _occ("m.js", 7, 4, "四"),
    ]

    grouping = group_occurrences(occs)

    flattened = [o for items in grouping.values() for o in items]
    assert Counter(flattened) == Counter(occs)
    for path, items in grouping.items():
        assert items
        assert all(o.file_path == path for o in items)
        # Same relative order as the input.
        assert items == [o for o in occs if o.file_path == path]


def test_duplicates_and_unsorted_lines_are_kept():
    occs = [_occ("a.ts", 10, 1, "后"), _occ("a.ts", 2, 1, "前"), _occ("a.ts", 2, 1, "前")]

    assert group_occurrences(occs)["a.ts"] == occs


def test_empty_input_gives_empty_grouping():
    assert group_occurrences([]) == {}
    assert group_occurrences(None) == {}
