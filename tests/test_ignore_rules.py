from src.core.ignore_rules import IgnoreRules, parse_exclude_patterns


def test_parse_exclude_patterns_trims_and_drops_blanks():
    assert parse_exclude_patterns(" node_modules , dist,, ") == ["node_modules", "dist"]
    assert parse_exclude_patterns("") == []
    assert parse_exclude_patterns(None) == []


def test_exclude_matches_directory_at_any_depth(tmp_path):
    rules = IgnoreRules(str(tmp_path), "node_modules")

    assert rules.is_excluded(str(tmp_path / "node_modules"), is_dir=True) is True
    assert rules.is_excluded(str(tmp_path / "pkg" / "node_modules"), is_dir=True) is True
    assert rules.is_excluded(str(tmp_path / "src"), is_dir=True) is False


def test_exclude_with_slash_is_relative_to_root(tmp_path):
    rules = IgnoreRules(str(tmp_path), "dist/*.js")

    assert rules.is_excluded(str(tmp_path / "dist" / "a.js")) is True
    assert rules.is_excluded(str(tmp_path / "src" / "dist" / "a.js")) is False


def test_no_patterns_excludes_nothing(tmp_path):
    rules = IgnoreRules(str(tmp_path), "")
    assert rules.is_excluded(str(tmp_path / "anything.js")) is False


def test_gitignore_in_root_and_subdirectory(tmp_path):
    (tmp_path / ".gitignore").write_text("build/\n*.min.js\n", encoding="utf-8")
    sub = tmp_path / "pkg"
    sub.mkdir()
    (sub / ".gitignore").write_text("generated.ts\n", encoding="utf-8")
    rules = IgnoreRules(str(tmp_path))

    assert rules.is_gitignored(str(tmp_path / "build"), is_dir=True) is True
    assert rules.is_gitignored(str(tmp_path / "pkg" / "app.min.js")) is True
    assert rules.is_gitignored(str(sub / "generated.ts")) is True
    # Scoped to its own directory.
    assert rules.is_gitignored(str(tmp_path / "generated.ts")) is False
    assert rules.is_gitignored(str(tmp_path / "src" / "app.js")) is False


def test_deeper_gitignore_can_reinclude(tmp_path):
    (tmp_path / ".gitignore").write_text("*.ts\n", encoding="utf-8")
    sub = tmp_path / "keep"
    sub.mkdir()
    (sub / ".gitignore").write_text("!important.ts\n", encoding="utf-8")
    rules = IgnoreRules(str(tmp_path))

    assert rules.is_gitignored(str(tmp_path / "a.ts")) is True
    assert rules.is_gitignored(str(sub / "important.ts")) is False
    assert rules.is_gitignored(str(sub / "other.ts")) is True


def test_git_directory_is_always_skipped(tmp_path):
    rules = IgnoreRules(str(tmp_path))
    assert rules.should_skip(str(tmp_path / ".git"), is_dir=True) is True
    assert rules.should_skip(str(tmp_path / "src"), is_dir=True) is False


def test_exclusion_wins_over_gitignore_negation(tmp_path):
    (tmp_path / ".gitignore").write_text("!vendor/\n", encoding="utf-8")
    rules = IgnoreRules(str(tmp_path), "vendor")
    assert rules.should_skip(str(tmp_path / "vendor"), is_dir=True) is True
