"""Hunk assembly: window an edit script into context-bounded, merged-or-split hunks"""

from typing import Optional, Sequence

from hunkdiff.core.models import EditKind, EditRun, Hunk, LineBuffer


def assemble_hunks(
    script: Sequence[EditRun],
    old_buf: LineBuffer,
    new_buf: LineBuffer,
    context_lines: int,
    ) -> list[Hunk]:
    """Walk the edit script and build hunks with context_lines of context around each change.

    Equal runs longer than 2 * context_lines between two changes split the output
    into separate hunks; shorter runs are shown in full inside a single hunk.
    Context is always printed from the old side. Cursors l1/l2 are absolute line
    indices; the buffers map them back onto their retained windows.
    """
    hunks: list[Hunk] = []
    hunk: Optional[Hunk] = None
    l1 = old_buf.first_line
    l2 = new_buf.first_line
    last = len(script) - 1

    for i, entry in enumerate(script):
        n = entry.count

        if hunk is None:
            if entry.kind == EditKind.equal:
                cnt = min(n, context_lines)
                hunk = Hunk(l1 + n - cnt, l2 + n - cnt)
                for j in range(n - cnt, n):
                    hunk.add_context(old_buf.text_at(l1 + j))
                hunks.append(hunk)
                l1 += n
                l2 += n
                continue
            hunk = Hunk(l1, l2)
            hunks.append(hunk)

        if entry.kind == EditKind.add:
            for j in range(n):
                hunk.add_new(new_buf.text_at(l2 + j))
            l2 += n
        elif entry.kind == EditKind.remove:
            for j in range(n):
                hunk.add_remove(old_buf.text_at(l1 + j))
            l1 += n
        elif i == last:
            for j in range(min(n, context_lines)):
                hunk.add_context(old_buf.text_at(l1 + j))
        elif n > 2 * context_lines:
            for j in range(context_lines):
                hunk.add_context(old_buf.text_at(l1 + j))
            l1 += n
            l2 += n
            hunk = Hunk(l1 - context_lines, l2 - context_lines)
            for j in range(context_lines, 0, -1):
                hunk.add_context(old_buf.text_at(l1 - j))
            hunks.append(hunk)
        else:
            for j in range(n):
                hunk.add_context(old_buf.text_at(l1 + j))
            l1 += n
            l2 += n

    # A script that is one Equal run opens a context-only hunk; that is not a difference
    return [h for h in hunks if h.has_changes]
