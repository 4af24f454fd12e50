"""Streaming unified diff generation with bounded-memory prefix handling"""

from loguru import logger

from hunkdiff.core.models import Hunk, HunkLine, SourceInfo
from hunkdiff.core.pipeline import build_hunks, create
from hunkdiff.core.utils.diff import diff_summary, unified_diff

# Library logging stays silent unless the application enables it
logger.disable("hunkdiff")

__all__ = [
    "Hunk", "HunkLine", "SourceInfo",
    "build_hunks", "create", "diff_summary", "unified_diff",
]
