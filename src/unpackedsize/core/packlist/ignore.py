from __future__ import annotations

"""
Ignore Rule Engine.

Parses gitignore-style pattern files (``.npmignore`` / ``.gitignore``)
and the manifest ``files`` whitelist into compiled regex rules, and
evaluates them against project-relative POSIX paths.
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from unpackedsize.domain.errors import ProjectLoadError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DEFAULT RULES
# -----------------------------------------------------------------------------

IGNORE_FILE_NAMES: List[str] = [".npmignore", ".gitignore"]

# Directories never traversed nor shipped
HARD_EXCLUDED_DIRS: List[str] = [".git", ".svn", ".hg", "CVS", "node_modules"]

DEFAULT_IGNORE_PATTERNS: List[str] = [
    ".npmignore",
    ".gitignore",
    ".npmrc",
    "npm-debug.log",
    ".*.swp",
    ".DS_Store",
    "._*",
    "*.orig",
    ".lock-wscript",
    ".wafpickle-[0-9]*",
    "config.gypi",
    "/package-lock.json",
    "/yarn.lock",
    "/pnpm-lock.yaml",
    "/archived-packages/",
    "/build/config.gypi",
]

_ALWAYS_INCLUDED_ROOT_RX = re.compile(
    r"^(?:package\.json|npm-shrinkwrap\.json|(?:readme|copying|license|licence)(?:\..*[^~$])?)$",
    re.IGNORECASE,
)

# -----------------------------------------------------------------------------
# RULE MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IgnoreRule:
    """
    One compiled gitignore-style pattern.

    Attributes:
        pattern: Raw pattern text as written in its source.
        regex: Compiled matcher for paths relative to ``base``.
        negated: The pattern re-includes instead of excluding.
        dir_only: The pattern only matches directories.
        base: POSIX directory (relative to the project) the rule lives in.
        source: Human label of where the rule came from.
    """
    pattern: str
    regex: re.Pattern
    negated: bool
    dir_only: bool
    base: str
    source: str

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        """Test a project-relative path against this rule."""
        if self.dir_only and not is_dir:
            return False
        local = _relative_to(rel_path, self.base)
        if local is None:
            return False
        return self.regex.match(local) is not None

    def matches_path_or_parent(self, rel_path: str) -> bool:
        """Test a file path and every directory above it."""
        parts = rel_path.split("/")
        for i in range(1, len(parts)):
            if self.matches("/".join(parts[:i]), is_dir=True):
                return True
        return self.matches(rel_path, is_dir=False)

# -----------------------------------------------------------------------------
# PARSING API
# -----------------------------------------------------------------------------

def parse_patterns(lines: Iterable[str], base: str = "", source: str = "") -> List[IgnoreRule]:
    """
    Compile gitignore-style lines into rules.

    Blank lines and ``#`` comments are skipped; malformed patterns are
    discarded with a debug message.

    Args:
        lines: Raw pattern lines.
        base: Directory the patterns are relative to ("" for the root).
        source: Label used in diagnostics.

    Returns:
        List[IgnoreRule]: Rules in file order.
    """
    rules: List[IgnoreRule] = []
    for raw in lines:
        rule = _parse_line(raw, base, source)
        if rule is not None:
            rules.append(rule)
    return rules


def load_ignore_file(abs_dir: str, rel_dir: str) -> List[IgnoreRule]:
    """
    Load the ignore rules that apply inside one directory.

    ``.npmignore`` takes precedence; ``.gitignore`` is read only when no
    ``.npmignore`` exists.

    Args:
        abs_dir: Absolute path of the directory.
        rel_dir: The same directory relative to the project root.

    Returns:
        List[IgnoreRule]: Parsed rules, empty when neither file exists.

    Raises:
        ProjectLoadError: If the ignore file exists but cannot be read.
    """
    for name in IGNORE_FILE_NAMES:
        path = os.path.join(abs_dir, name)
        if not os.path.isfile(path):
            continue
        label = f"{rel_dir}/{name}" if rel_dir else name
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                rules = parse_patterns(f, base=rel_dir, source=label)
        except OSError as e:
            raise ProjectLoadError(f"Cannot read ignore file '{label}': {e.strerror or e}") from e
        logger.debug(f"Loaded {len(rules)} rules from {label}")
        return rules
    return []


def default_ignore_rules() -> List[IgnoreRule]:
    """Rules applied to every package regardless of its own ignore files."""
    return parse_patterns(DEFAULT_IGNORE_PATTERNS, source="default")


def whitelist_rules(entries: Iterable[str]) -> List[IgnoreRule]:
    """
    Compile manifest ``files`` entries.

    A positive entry matches a path or any directory above it; a ``!``
    entry removes what it matches.

    Args:
        entries: Raw ``files`` values from the manifest.

    Returns:
        List[IgnoreRule]: Rules where ``negated`` marks an exclusion.
    """
    cleaned: List[str] = []
    for entry in entries:
        e = entry.strip().replace("\\", "/")
        negate = e.startswith("!")
        if negate:
            e = e[1:]
        while e.startswith("./"):
            e = e[2:]
        if e.endswith("/**"):
            e = e[:-3]
        elif e.endswith("/*"):
            e = e[:-2]
        if e.strip("/"):
            cleaned.append(("!" if negate else "") + e)
    return parse_patterns(cleaned, source="package.json#files")

# -----------------------------------------------------------------------------
# EVALUATION API
# -----------------------------------------------------------------------------

def last_verdict(rules: Iterable[IgnoreRule], rel_path: str, is_dir: bool) -> Optional[bool]:
    """
    Resolve the outcome of an ordered rule list for one path.

    Args:
        rules: Rules ordered from outermost to innermost source.
        rel_path: Project-relative POSIX path.
        is_dir: Whether the path is a directory.

    Returns:
        Optional[bool]: True if ignored, False if re-included, None if no
        rule matched.
    """
    verdict: Optional[bool] = None
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            verdict = not rule.negated
    return verdict


def is_whitelisted(rules: Iterable[IgnoreRule], rel_path: str) -> bool:
    """True if the last whitelist entry matching the file (or a parent) is positive."""
    verdict = False
    for rule in rules:
        if rule.matches_path_or_parent(rel_path):
            verdict = not rule.negated
    return verdict


def is_always_included(rel_path: str) -> bool:
    """Root manifest, shrinkwrap, readme and licence files always ship."""
    return "/" not in rel_path and _ALWAYS_INCLUDED_ROOT_RX.match(rel_path) is not None

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_line(raw: str, base: str, source: str) -> Optional[IgnoreRule]:
    """Translate one pattern line; None for blanks, comments and bad globs."""
    line = raw.rstrip("\n").rstrip("\r")
    # Unescaped trailing spaces are insignificant
    if not line.endswith("\\ "):
        line = line.rstrip(" ")
    if not line or line.startswith("#"):
        return None

    negated = line.startswith("!")
    if negated:
        line = line[1:]
    elif line.startswith("\\!") or line.startswith("\\#"):
        line = line[1:]

    dir_only = line.endswith("/")
    body = line.rstrip("/")
    if not body:
        return None

    anchored = "/" in body
    body = body.lstrip("/")

    try:
        regex = re.compile(_glob_to_regex(body, anchored))
    except re.error:
        logger.debug(f"Skipping malformed pattern '{raw.strip()}' from {source}")
        return None

    return IgnoreRule(
        pattern=raw.strip(),
        regex=regex,
        negated=negated,
        dir_only=dir_only,
        base=base,
        source=source,
    )


def _glob_to_regex(glob: str, anchored: bool) -> str:
    """
    Translate a gitignore glob into a full-match regex.

    Unanchored globs (no inner slash) match a basename at any depth.
    """
    out: List[str] = []
    i, n = 0, len(glob)

    while i < n:
        c = glob[i]
        if c == "*":
            if glob.startswith("**", i):
                at_start = i == 0 or glob[i - 1] == "/"
                after = i + 2
                if at_start and after < n and glob[after] == "/":
                    out.append("(?:.*/)?")
                    i = after + 1
                    continue
                if at_start and after == n:
                    out.append(".*")
                    i = after
                    continue
                out.append("[^/]*")
                i = after
                continue
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "[":
            j = glob.find("]", i + 2 if glob.startswith("[!", i) or glob.startswith("[^", i) else i + 1)
            if j == -1:
                out.append(re.escape(c))
            else:
                inner = glob[i + 1:j]
                if inner.startswith("!"):
                    inner = "^" + inner[1:]
                out.append(f"[{inner}]")
                i = j
        elif c == "\\" and i + 1 < n:
            i += 1
            out.append(re.escape(glob[i]))
        else:
            out.append(re.escape(c))
        i += 1

    body = "".join(out)
    if anchored:
        return f"^{body}$"
    return f"^(?:.*/)?{body}$"


def _relative_to(rel_path: str, base: str) -> Optional[str]:
    """Strip ``base`` from ``rel_path``; None when the path lies outside it."""
    if not base:
        return rel_path
    prefix = base + "/"
    if rel_path.startswith(prefix):
        return rel_path[len(prefix):]
    return None
