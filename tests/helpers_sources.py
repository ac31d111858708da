"""Helpers for building Ruby source trees in tests."""

from __future__ import annotations

from pathlib import Path


def write_source(root: Path, relative_path: str, lines: list[str] | bytes) -> Path:
    """Write a file under root, creating parent directories."""
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(lines, bytes):
        path.write_bytes(lines)
    else:
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path
