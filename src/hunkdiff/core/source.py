"""Line source adapter: lazily read a caller-owned stream as terminator-free lines"""

import codecs
import io
from typing import IO, Iterator, Optional


CHUNK_SIZE = 8192


def is_binary(stream: IO) -> bool:
    """True for raw/buffered byte streams."""
    return isinstance(stream, (io.RawIOBase, io.BufferedIOBase))


def strip_terminator(line: str) -> str:
    """Remove one trailing '\\r\\n', '\\n' or '\\r'."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def _decoded_lines(stream: IO, encoding: str) -> Iterator[str]:
    """Decode a byte stream chunk by chunk and yield '\\n'-terminated lines.

    One incremental decoder spans the whole stream, so multi-byte newlines
    (UTF-16/32) and a leading BOM are handled once, not per line.
    """
    decoder = codecs.getincrementaldecoder(encoding)()
    pending = ""
    while True:
        chunk = stream.read(CHUNK_SIZE)
        pending += decoder.decode(chunk or b"", final=not chunk)
        *lines, pending = pending.split("\n")
        for line in lines:
            yield line + "\n"
        if not chunk:
            break
    if pending:
        yield pending


def _text_lines(stream: IO) -> Iterator[str]:
    while True:
        line = stream.readline()
        if not line:
            return
        yield line


def iter_lines(stream: Optional[IO], encoding: str = "utf-8") -> Iterator[str]:
    """Yield lines from stream without their terminators. None yields nothing.

    Text streams are read with readline(); byte streams are read in chunks and
    decoded with `encoding`. Nothing beyond the current chunk is buffered here
    and the stream is never closed. A final line without a terminator is still
    yielded.
    """
    if stream is None:
        return
    lines = _decoded_lines(stream, encoding) if is_binary(stream) else _text_lines(stream)
    for line in lines:
        yield strip_terminator(line)
