"""Acquire the item set JSON from stdin, a file or a literal argument."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ie_common.errors import MalformedInputError, UsageError

logger = logging.getLogger(__name__)

END_OF_INPUT = "\n\n"


def _undecodable(source: str, exc: UnicodeDecodeError) -> MalformedInputError:
    return MalformedInputError(
        f"Input from {source} is not valid UTF-8 (byte {exc.start})",
        context={"source": source, "position": exc.start},
        cause=exc,
    )


def read_framed_stdin(stream: TextIO | None = None) -> str:
    """Read characters until two consecutive newlines (or EOF)."""
    stream = stream if stream is not None else sys.stdin
    chunks: list[str] = []
    tail = ""
    while True:
        try:
            char = stream.read(1)
        except UnicodeDecodeError as exc:
            raise _undecodable("stdin", exc) from exc
        if not char:
            break
        chunks.append(char)
        tail = (tail + char)[-len(END_OF_INPUT):]
        if tail == END_OF_INPUT:
            break
    return "".join(chunks)


def read_input(
    *,
    use_stdin: bool = False,
    file: Optional[Path] = None,
    literal: Optional[str] = None,
    stream: TextIO | None = None,
) -> str:
    """Return the raw JSON text from exactly one selected source."""
    selected = [
        name
        for name, chosen in (
            ("--stdin", use_stdin),
            ("--file", file is not None),
            ("--input", literal is not None),
        )
        if chosen
    ]
    if not selected:
        raise UsageError("No input specified; use --stdin, --file or --input (see --help).")
    if len(selected) > 1:
        raise UsageError(
            f"Choose a single input source, got {', '.join(selected)}.",
            context={"sources": selected},
        )

    if use_stdin:
        logger.debug("Reading item set from stdin")
        return read_framed_stdin(stream)
    if file is not None:
        path = Path(file).expanduser()
        logger.debug("Reading item set from %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise _undecodable(str(path), exc) from exc
        except OSError as exc:
            raise UsageError(
                f"Cannot read input file {path}: {exc.strerror or exc}",
                context={"path": path},
                cause=exc,
            ) from exc
    assert literal is not None
    return literal
