"""Run options for ruby-clean."""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from ruby_clean.walker import DEFAULT_EXTENSION

DEFAULT_ENCODING = "utf-8"


@dataclass(slots=True)
class CheckerConfig:
    """Options resolved from the command line."""

    extension: str = DEFAULT_EXTENSION
    encoding: str = DEFAULT_ENCODING
    color: bool | None = None


def build_checker_config(
    *,
    extension: str | None = None,
    encoding: str | None = None,
    color: bool | None = None,
) -> CheckerConfig:
    """Validate raw option values and return a CheckerConfig."""
    return CheckerConfig(
        extension=_normalize_extension(extension),
        encoding=_validate_encoding(encoding),
        color=color,
    )


def _normalize_extension(extension: str | None) -> str:
    if extension is None:
        return DEFAULT_EXTENSION
    value = extension.strip()
    if value in {"", "."}:
        raise ValueError("Extension must not be empty.")
    if not value.startswith("."):
        value = f".{value}"
    return value


def _validate_encoding(encoding: str | None) -> str:
    if encoding is None:
        return DEFAULT_ENCODING
    try:
        codecs.lookup(encoding)
        encoded_newline = "\n".encode(encoding)
    except LookupError as exc:
        raise ValueError(f"Unknown encoding: {encoding}") from exc
    # Lines are split on the raw 0x0A byte before decoding.
    if encoded_newline != b"\n":
        raise ValueError(f"Encoding must be ASCII-compatible: {encoding}")
    return encoding
