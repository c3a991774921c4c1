from __future__ import annotations

"""
Publishable File Enumerator.

Walks a project directory and selects the files a registry pack
operation would ship, combining the default ignores, per-directory
ignore files, the manifest ``files`` whitelist, workspace boundaries and
the always-included files.
"""

import glob
import logging
import os
from typing import Callable, Dict, List, Set

from unpackedsize.core.packlist.ignore import (
    HARD_EXCLUDED_DIRS,
    IgnoreRule,
    default_ignore_rules,
    is_always_included,
    is_whitelisted,
    last_verdict,
    load_ignore_file,
    whitelist_rules,
)
from unpackedsize.core.packlist.project import PackageProject
from unpackedsize.domain.errors import ProjectLoadError

logger = logging.getLogger(__name__)

FileEnumerator = Callable[[PackageProject], List[str]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def enumerate_pack_files(project: PackageProject) -> List[str]:
    """
    List the publishable files of ``project``.

    Args:
        project: Loaded package model.

    Returns:
        List[str]: Sorted, de-duplicated POSIX paths relative to the root.

    Raises:
        ProjectLoadError: If a directory or ignore file cannot be read.
    """
    root = project.root
    files_entries = project.files
    whitelist = whitelist_rules(files_entries) if files_entries is not None else None
    defaults = default_ignore_rules()
    workspace_dirs = _resolve_workspaces(project)

    # Rule stacks per directory, outermost first
    rules_by_dir: Dict[str, List[IgnoreRule]] = {}
    selected: Set[str] = set()

    for abs_dir, dirs, files in os.walk(root, onerror=_raise_walk_error):
        rel_dir = _to_posix(os.path.relpath(abs_dir, root))
        if rel_dir == ".":
            rel_dir = ""

        inherited = rules_by_dir.get(_parent(rel_dir), []) if rel_dir else []
        if rel_dir == "" and whitelist is not None:
            # A files list replaces the root ignore file
            own: List[IgnoreRule] = []
        else:
            own = load_ignore_file(abs_dir, rel_dir)
        active = inherited + own
        rules_by_dir[rel_dir] = active

        kept_dirs: List[str] = []
        for d in sorted(dirs):
            rel = _join(rel_dir, d)
            if d in HARD_EXCLUDED_DIRS or rel in workspace_dirs:
                continue
            if os.path.islink(os.path.join(abs_dir, d)):
                continue
            if last_verdict(active, rel, is_dir=True) or last_verdict(defaults, rel, is_dir=True):
                logger.debug(f"Pruned ignored directory: {rel}")
                continue
            kept_dirs.append(d)
        dirs[:] = kept_dirs

        for name in sorted(files):
            rel = _join(rel_dir, name)
            if os.path.islink(os.path.join(abs_dir, name)):
                continue
            if is_always_included(rel):
                selected.add(rel)
                continue
            if last_verdict(defaults, rel, is_dir=False):
                continue
            if whitelist is not None and not is_whitelisted(whitelist, rel):
                continue
            if last_verdict(active, rel, is_dir=False):
                continue
            selected.add(rel)

    for entry in project.entry_points:
        if _is_shippable_entry_point(root, entry, workspace_dirs):
            selected.add(entry)

    result = sorted(selected)
    logger.info(f"Enumerated {len(result)} publishable files in {root}")
    return result

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _resolve_workspaces(project: PackageProject) -> Set[str]:
    """Expand workspace globs into project-relative directory paths."""
    found: Set[str] = set()
    for pattern in project.workspaces:
        for match in glob.glob(os.path.join(glob.escape(project.root), pattern), recursive=True):
            if os.path.isdir(match):
                rel = _to_posix(os.path.relpath(match, project.root))
                if rel != "." and not rel.startswith(".."):
                    found.add(rel)
    if found:
        logger.debug(f"Workspace directories excluded: {sorted(found)}")
    return found


def _is_shippable_entry_point(root: str, rel: str, workspace_dirs: Set[str]) -> bool:
    """Entry points ship when they exist, unless they sit in excluded folders."""
    parts = rel.split("/")
    if any(p in HARD_EXCLUDED_DIRS or p == ".." for p in parts[:-1]):
        return False
    for i in range(1, len(parts)):
        if "/".join(parts[:i]) in workspace_dirs:
            return False
    # Same rule as the walk: nothing reached through a symlink ships
    for i in range(1, len(parts) + 1):
        if os.path.islink(os.path.join(root, *parts[:i])):
            return False
    return os.path.isfile(os.path.join(root, *parts))


def _raise_walk_error(error: OSError) -> None:
    """Turn a failed directory listing into a fatal load error."""
    where = error.filename or "?"
    raise ProjectLoadError(f"Cannot list directory '{where}': {error.strerror or error}") from error


def _to_posix(path: str) -> str:
    return path.replace(os.sep, "/")


def _parent(rel_dir: str) -> str:
    return rel_dir.rsplit("/", 1)[0] if "/" in rel_dir else ""


def _join(rel_dir: str, name: str) -> str:
    return f"{rel_dir}/{name}" if rel_dir else name
