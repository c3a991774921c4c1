from __future__ import annotations

"""
Analysis Result Models.

Defines the immutable result handed from the analysis engine to the
reporting layer, which alone turns it into output and an exit status.
"""

from dataclasses import dataclass, field
from typing import List

from unpackedsize.domain.size_models import Exceeded, FileEntry, SizeNode, ThresholdResult

EXIT_OK = 0
EXIT_THRESHOLD_EXCEEDED = 1
EXIT_ERROR = 2

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of one complete analysis run.

    Attributes:
        base_path: Absolute project directory that was analysed.
        project_name: Package name (or directory name without a manifest).
        total_size: Sum of every publishable file size.
        tree: Aggregated size tree rooted at an unnamed node.
        threshold: Result of the size ceiling check.
        files: Stated publishable files in enumeration order.
    """
    base_path: str
    project_name: str
    total_size: int
    tree: SizeNode
    threshold: ThresholdResult
    files: List[FileEntry] = field(default_factory=list)

    @property
    def exceeded(self) -> bool:
        return isinstance(self.threshold, Exceeded)

    @property
    def exit_code(self) -> int:
        return EXIT_THRESHOLD_EXCEEDED if self.exceeded else EXIT_OK
