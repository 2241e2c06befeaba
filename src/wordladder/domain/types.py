"""Error codes and edit classifications shared across layers."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Failure codes carried by ``ServiceError.code``."""

    INVALID_VERTEX = "INVALID_VERTEX"
    DUPLICATE_VERTEX = "DUPLICATE_VERTEX"
    SELF_REFERENCE = "SELF_REFERENCE"
    UNREACHABLE = "UNREACHABLE"
    NOT_PRECOMPUTED = "NOT_PRECOMPUTED"
    EMPTY_VOCABULARY = "EMPTY_VOCABULARY"
    IO_ERROR = "IO_ERROR"
    INVALID_INPUT = "INVALID_INPUT"


class EditKind(StrEnum):
    """The single-character edit turning one word into another."""

    SUBSTITUTION = "substitution"
    INSERTION = "insertion"
    DELETION = "deletion"
