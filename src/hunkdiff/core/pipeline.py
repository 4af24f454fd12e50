"""Pipeline step orchestration: scan -> trim -> align -> assemble -> write"""

from typing import IO, Optional

from loguru import logger

from hunkdiff.core.align import align
from hunkdiff.core.compare import ExactComparer, LineComparer
from hunkdiff.core.hunks import assemble_hunks
from hunkdiff.core.models import Hunk, SourceInfo
from hunkdiff.core.scan import scan_sources, trim_suffix
from hunkdiff.core.writer import write_unified


def _check_context(context_lines: int) -> None:
    if context_lines < 0:
        raise ValueError("context_lines cannot be negative")


def _stream(info: Optional[SourceInfo]) -> Optional[IO]:
    return info.stream if info is not None else None


def _label(info: Optional[SourceInfo]) -> str:
    return (info.label or "") if info is not None else ""


def _build(
    old: Optional[SourceInfo],
    new: Optional[SourceInfo],
    context_lines: int,
    comparer: LineComparer,
    encoding: str,
    ) -> list[Hunk]:
    old_buf, new_buf, start = scan_sources(_stream(old), _stream(new), context_lines, comparer, encoding)
    end = trim_suffix(old_buf, new_buf, start, context_lines, comparer)
    logger.debug(
        "Scanned sources: first_line={} start={} end={} old={} new={} retained",
        old_buf.first_line, start, end, len(old_buf), len(new_buf),
    )

    script = align(old_buf.lines, new_buf.lines, start, end, comparer)
    hunks = assemble_hunks(script, old_buf, new_buf, context_lines)
    logger.debug("Edit script has {} run(s); assembled {} hunk(s)", len(script), len(hunks))
    return hunks


def build_hunks(
    old: Optional[SourceInfo],
    new: Optional[SourceInfo],
    context_lines: int = 3,
    comparer: Optional[LineComparer] = None,
    encoding: str = "utf-8",
    ) -> list[Hunk]:
    """Return the hunks of a unified diff between old and new without writing them.

    Raises ValueError if context_lines is negative.
    """
    _check_context(context_lines)
    return _build(old, new, context_lines, comparer or ExactComparer(), encoding)


def create(
    old: Optional[SourceInfo],
    new: Optional[SourceInfo],
    output: Optional[IO],
    context_lines: int = 3,
    comparer: Optional[LineComparer] = None,
    encoding: str = "utf-8",
    ) -> bool:
    """Write a unified diff of old -> new to output.

    Returns True if at least one hunk was written, False (and writes nothing)
    when the sources do not differ. A missing SourceInfo or stream is an empty
    source. Raises ValueError before any I/O if output is None or context_lines
    is negative; stream read/write errors propagate unchanged. Streams are
    never closed.
    """
    if output is None:
        raise ValueError("output must not be None")
    _check_context(context_lines)

    hunks = _build(old, new, context_lines, comparer or ExactComparer(), encoding)
    return write_unified(output, hunks, _label(old), _label(new), encoding)
