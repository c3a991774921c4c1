from __future__ import annotations

"""
Analysis orchestration pipeline.

Coordinates a single unpacked-size run:
1. Validates options before touching the filesystem.
2. Loads the project model and enumerates its publishable files.
3. Stats every file (all I/O completes here).
4. Builds the aggregated size tree.
5. Applies the threshold gate.
"""

import logging
import os
from typing import Any, Callable, Dict, Optional, Union

from unpackedsize.core.analysis.threshold import check_threshold
from unpackedsize.core.analysis.tree_builder import build_size_tree
from unpackedsize.core.packlist import (
    FileEnumerator,
    PackageProject,
    enumerate_pack_files,
    load_project,
)
from unpackedsize.core.pipeline.validator import validate_options
from unpackedsize.domain.analysis_models import AnalysisResult
from unpackedsize.domain.config import AnalyzeOptions
from unpackedsize.infra.fs import normalize_path, stat_pack_files

logger = logging.getLogger(__name__)

ProjectLoader = Callable[[str], PackageProject]


def run_analysis(
        cwd: Optional[str],
        options: Union[AnalyzeOptions, Dict[str, Any], None] = None,
        *,
        enumerator: Optional[FileEnumerator] = None,
        loader: Optional[ProjectLoader] = None,
) -> AnalysisResult:
    """
    Measure the unpacked size of the package in ``cwd``.

    Args:
        cwd: Project directory; blank means the current directory.
        options: Validated options, or a raw mapping to validate.
        enumerator: Publishable file enumerator (defaults to the npm rules).
        loader: Project model loader (defaults to the manifest loader).

    Returns:
        AnalysisResult: Totals, tree and threshold outcome.

    Raises:
        ConfigurationError: If raw options are invalid.
        ProjectLoadError: If the directory or its manifest cannot be loaded.
        FileStatError: If an enumerated file cannot be stated.
        TreeContractError: If the enumerator repeats a path.
    """
    if not isinstance(options, AnalyzeOptions):
        options, _ = validate_options(options, strict=True)

    base_path = normalize_path(cwd, os.getcwd())
    logger.info(f"Analysis started for: {base_path}")

    project = (loader or load_project)(base_path)
    rel_paths = (enumerator or enumerate_pack_files)(project)

    files = stat_pack_files(project.root, rel_paths)
    total_size = sum(f.size for f in files)

    tree = build_size_tree(files)
    threshold = check_threshold(total_size, options.fail_if_exceeds_bytes)

    logger.info(f"Analysis finished: {len(files)} files, {total_size} bytes.")

    return AnalysisResult(
        base_path=project.root,
        project_name=project.name,
        total_size=total_size,
        tree=tree,
        threshold=threshold,
        files=files,
    )
