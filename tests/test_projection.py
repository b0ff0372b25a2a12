from src.core.expansion import ExpansionState
from src.core.grouping import group_occurrences
from src.core.models import Occurrence
from src.core.projection import FileGroupView, project


def _grouping():
    return group_occurrences(
        [
            Occurrence("a.ts", 1, 1, "你好"),
            Occurrence("b.ts", 2, 1, "世界"),
            Occurrence("a.ts", 5, 3, "测试"),
        ]
    )


def test_projection_follows_grouping_order_and_counts():
    views = project(_grouping(), ExpansionState())

    assert [v.file_path for v in views] == ["a.ts", "b.ts"]
    assert [v.occurrence_count for v in views] == [2, 1]


def test_collapsed_groups_carry_no_rows():
    views = project(_grouping(), ExpansionState())

    assert all(v.expanded is False for v in views)
    assert all(v.occurrences is None for v in views)


def test_expanded_group_lists_occurrences_in_order():
    grouping = _grouping()
    expansion = ExpansionState()
    expansion.toggle("a.ts")

    views = project(grouping, expansion)

    assert views[0] == FileGroupView(
        file_path="a.ts",
        occurrence_count=2,
        expanded=True,
        occurrences=tuple(grouping["a.ts"]),
    )
    assert views[1].expanded is False


def test_expansion_of_unknown_path_is_ignored():
    expansion = ExpansionState()
    expansion.toggle("missing.ts")

    views = project(_grouping(), expansion)

    assert [v.file_path for v in views] == ["a.ts", "b.ts"]


def test_empty_grouping_projects_nothing():
    assert project({}, ExpansionState()) == []
