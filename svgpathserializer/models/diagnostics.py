"""Diagnostic records emitted by the parser and attribute decoder."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DiagnosticKind(enum.Enum):
    COMMAND_ERROR = "command_error"
    TRAILING_DATA = "trailing_data"
    UNSUPPORTED_FEATURE = "unsupported_feature"
    ATTRIBUTE_DECODE_ERROR = "attribute_decode_error"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    # Offset into the source text, where one applies
    offset: int | None = None
    command: str | None = None

    def __str__(self) -> str:
        where = f" at index {self.offset}" if self.offset is not None else ""
        return f"{self.kind.value}{where}: {self.message}"
