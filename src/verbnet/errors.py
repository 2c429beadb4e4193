# src/verbnet/errors.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ============================================================
# Build-time failures (fatal)
# ============================================================

class VerbNetError(Exception):
    pass


class MalformedDocument(VerbNetError, ValueError):
    """XML that the tokenizer rejects."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class CorpusIntegrityError(VerbNetError, ValueError):
    """Well-formed XML missing something the class model requires."""


class CorpusTimeoutError(CorpusIntegrityError):
    pass


# ============================================================
# Query-time result values
# ============================================================

@dataclass(frozen=True)
class UnknownClass:
    class_id: str

    def __bool__(self) -> bool:
        return False
