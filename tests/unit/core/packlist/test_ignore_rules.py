from __future__ import annotations

"""
Unit tests for the Ignore Rule Engine.

Verifies:
1. Pattern parsing (comments, negation, anchoring, directory-only).
2. Glob translation for '*', '?', '**' and character classes.
3. Rule scoping to nested directories.
4. Whitelist and always-included file semantics.
"""

import pytest

from unpackedsize.core.packlist.ignore import (
    _glob_to_regex,
    default_ignore_rules,
    is_always_included,
    is_whitelisted,
    last_verdict,
    load_ignore_file,
    parse_patterns,
    whitelist_rules,
)


def _single(pattern: str, base: str = ""):
    rules = parse_patterns([pattern], base=base)
    assert len(rules) == 1
    return rules[0]


def test_comments_and_blank_lines_are_skipped():
    rules = parse_patterns(["# comment", "", "   ", "*.log\n"])

    assert [r.pattern for r in rules] == ["*.log"]


def test_escaped_hash_is_literal():
    rule = _single("\\#notes")

    assert rule.matches("#notes", is_dir=False)


def test_unanchored_pattern_matches_at_any_depth():
    rule = _single("build")

    assert rule.matches("build", is_dir=True)
    assert rule.matches("src/build", is_dir=True)
    assert not rule.matches("builder", is_dir=True)


def test_leading_slash_anchors_to_base():
    rule = _single("/build")

    assert rule.matches("build", is_dir=True)
    assert not rule.matches("src/build", is_dir=True)


def test_inner_slash_anchors_to_base():
    rule = _single("docs/api")

    assert rule.matches("docs/api", is_dir=True)
    assert not rule.matches("x/docs/api", is_dir=True)


def test_trailing_slash_only_matches_directories():
    rule = _single("docs/")

    assert rule.dir_only is True
    assert rule.matches("docs", is_dir=True)
    assert not rule.matches("docs", is_dir=False)


def test_star_does_not_cross_directories():
    rule = _single("lib/*.js")

    assert rule.matches("lib/a.js", is_dir=False)
    assert not rule.matches("lib/sub/a.js", is_dir=False)


@pytest.mark.parametrize(
    "pattern, path, expected",
    [
        ("a/**/b", "a/b", True),
        ("a/**/b", "a/x/y/b", True),
        ("**/foo", "foo", True),
        ("**/foo", "deep/er/foo", True),
        ("dist/**", "dist/a/b.js", True),
        ("dist/**", "dist", False),
        ("file?.txt", "file1.txt", True),
        ("file?.txt", "file10.txt", False),
        ("*.[ch]", "main.c", True),
        ("*.[!ch]", "main.c", False),
    ],
)
def test_glob_translation(pattern, path, expected):
    assert _single(pattern).matches(path, is_dir=False) is expected


def test_glob_to_regex_unanchored_prefix():
    assert _glob_to_regex("*.md", anchored=False) == r"^(?:.*/)?[^/]*\.md$"


def test_rules_are_scoped_to_their_directory():
    rule = _single("*.map", base="lib")

    assert rule.matches("lib/index.js.map", is_dir=False)
    assert rule.matches("lib/sub/x.map", is_dir=False)
    assert not rule.matches("index.js.map", is_dir=False)
    assert not rule.matches("library/x.map", is_dir=False)


def test_last_matching_rule_wins():
    rules = parse_patterns(["*.log", "!keep.log"])

    assert last_verdict(rules, "debug.log", is_dir=False) is True
    assert last_verdict(rules, "keep.log", is_dir=False) is False
    assert last_verdict(rules, "index.js", is_dir=False) is None


def test_default_rules_cover_common_noise():
    rules = default_ignore_rules()

    for path in [".DS_Store", "sub/.npmrc", "npm-debug.log", "._resource", "x.orig", ".gitignore"]:
        assert last_verdict(rules, path, is_dir=False), path
    assert last_verdict(rules, "package-lock.json", is_dir=False)
    assert not last_verdict(rules, "sub/package-lock.json", is_dir=False)
    assert not last_verdict(rules, "index.js", is_dir=False)


def test_npmignore_takes_precedence_over_gitignore(tmp_path):
    (tmp_path / ".gitignore").write_text("dist\n", encoding="utf-8")
    (tmp_path / ".npmignore").write_text("test\n", encoding="utf-8")

    rules = load_ignore_file(str(tmp_path), "")

    assert [r.pattern for r in rules] == ["test"]
    assert rules[0].source == ".npmignore"


def test_gitignore_used_without_npmignore(tmp_path):
    (tmp_path / ".gitignore").write_text("coverage/\n", encoding="utf-8")

    rules = load_ignore_file(str(tmp_path), "sub")

    assert rules[0].source == "sub/.gitignore"
    assert rules[0].matches("sub/coverage", is_dir=True)


def test_whitelist_includes_directory_contents():
    rules = whitelist_rules(["./dist/", "!dist/test", "bin/cli.js"])

    assert is_whitelisted(rules, "dist/index.js")
    assert is_whitelisted(rules, "dist/deep/a.js")
    assert not is_whitelisted(rules, "dist/test/spec.js")
    assert is_whitelisted(rules, "bin/cli.js")
    assert not is_whitelisted(rules, "src/index.ts")


def test_whitelist_glob_suffixes_are_normalized():
    rules = whitelist_rules(["lib/**", "types/*"])

    assert is_whitelisted(rules, "lib/a/b.js")
    assert is_whitelisted(rules, "types/index.d.ts")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("package.json", True),
        ("README.md", True),
        ("readme", True),
        ("LICENSE", True),
        ("LICENCE.txt", True),
        ("COPYING", True),
        ("npm-shrinkwrap.json", True),
        ("README.md~", False),
        ("docs/README.md", False),
        ("lib/package.json", False),
        ("index.js", False),
    ],
)
def test_always_included_files(path, expected):
    assert is_always_included(path) is expected
