"""Source file discovery and line reading."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import AnyStr

from ruby_clean.rules.base import LineProblem, SourceLine

DEFAULT_EXTENSION = ".rb"


class WalkError(RuntimeError):
    """Raised when a command-line path cannot be resolved."""


class SourceReadError(RuntimeError):
    """Raised when a source file cannot be read."""


def iter_source_files(path: Path, *, extension: str = DEFAULT_EXTENSION) -> Iterator[Path]:
    """Yield files to check below a path.

    A file is yielded as-is whatever its extension. A directory is walked
    recursively, in sorted order, skipping hidden entries.
    """
    if path.is_file():
        yield path
        return
    if not path.is_dir():
        raise WalkError(f"Path does not exist: {path}")

    try:
        candidates = sorted(path.rglob("*"))
    except OSError as exc:
        raise WalkError(f"Cannot list directory {path}: {exc}") from exc

    for candidate in candidates:
        relative = candidate.relative_to(path)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if candidate.suffix == extension and candidate.is_file():
            yield candidate


def read_source_lines(
    path: Path, *, encoding: str = "utf-8"
) -> Iterator[SourceLine | LineProblem]:
    """Yield each physical line of a file, decoding lines independently."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SourceReadError(f"Cannot read {path}: {exc.strerror or exc}") from exc

    display_path = str(path)
    for number, raw in enumerate(split_physical_lines(data), start=1):
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as exc:
            yield LineProblem(path=display_path, line_number=number, message=str(exc))
            continue
        yield SourceLine(path=display_path, number=number, text=text)


def split_physical_lines(data: AnyStr) -> list[AnyStr]:
    """Split on ``\\n`` only, keeping terminators; a lone ``\\r`` stays in its line."""
    newline = b"\n" if isinstance(data, bytes) else "\n"
    parts = data.split(newline)
    lines = [part + newline for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines
