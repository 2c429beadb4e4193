# src/verbnet/index.py
from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import CorpusIntegrityError, UnknownClass
from .loader import CorpusConfig, load_corpus, load_corpus_from_config
from .models import Frame, FrameMatch, MemberInfo, SelRestriction, VerbClass

logger = logging.getLogger(__name__)

IndexKey = Tuple[str, str]
Pattern = Union[str, Sequence[str]]


# ============================================================
# Index builder
# ============================================================

def build_frame_index(classes: Iterable[VerbClass]) -> Mapping[IndexKey, Tuple[FrameMatch, ...]]:
    """
    (pattern, member) -> matches, in class order, then frame order, then
    member order. No precedence between classes beyond corpus order.
    """
    grouped: Dict[IndexKey, List[FrameMatch]] = {}
    for vc in classes:
        for pattern, frame in vc.frames.items():
            match = FrameMatch(vc.class_id, frame)
            for member in vc.members:
                grouped.setdefault((pattern, member), []).append(match)
    return MappingProxyType({k: tuple(v) for k, v in grouped.items()})


def join_pattern(pattern: Pattern) -> str:
    if isinstance(pattern, str):
        return pattern
    return " ".join(pattern)


# ============================================================
# Query facade
# ============================================================


class VerbNet:
    """
    Read-only lookup over an extracted VerbNet corpus.

    Class lookups return an UnknownClass value (falsy) for ids that were never
    extracted; find_frames returns [] when nothing matches.
    """

    def __init__(self, classes: Iterable[VerbClass]):
        by_id: Dict[str, VerbClass] = {}
        for vc in classes:
            if vc.class_id in by_id:
                raise CorpusIntegrityError(f"duplicate class id {vc.class_id!r}")
            by_id[vc.class_id] = vc
        self._classes: Mapping[str, VerbClass] = MappingProxyType(by_id)
        self._index = build_frame_index(by_id.values())
        logger.info("indexed %d classes into %d (pattern, member) keys", len(by_id), len(self._index))

    @classmethod
    def from_directory(
        cls,
        directory: str | Path,
        *,
        pattern: str = "*.xml",
        workers: Optional[int] = None,
        timeout: Optional[float] = None,
        strict: bool = False,
    ) -> "VerbNet":
        return cls(load_corpus(directory, pattern=pattern, workers=workers, timeout=timeout, strict=strict))

    @classmethod
    def from_config(cls, config: CorpusConfig | str | Path) -> "VerbNet":
        return cls(load_corpus_from_config(config))

    # ------------------------------------------------------------
    # Class projections
    # ------------------------------------------------------------

    def verb_class(self, class_id: str) -> Union[VerbClass, UnknownClass]:
        vc = self._classes.get(class_id)
        return vc if vc is not None else UnknownClass(class_id)

    def members(self, class_id: str) -> Union[Mapping[str, MemberInfo], UnknownClass]:
        vc = self.verb_class(class_id)
        return vc.members if vc else vc

    def roles(self, class_id: str) -> Union[Mapping[str, Tuple[SelRestriction, ...]], UnknownClass]:
        vc = self.verb_class(class_id)
        return vc.themroles if vc else vc

    def frames(self, class_id: str) -> Union[Mapping[str, Frame], UnknownClass]:
        vc = self.verb_class(class_id)
        return vc.frames if vc else vc

    # ------------------------------------------------------------
    # Frame lookup
    # ------------------------------------------------------------

    def find_frames(self, pattern: Pattern, member: str) -> List[FrameMatch]:
        return list(self._index.get((join_pattern(pattern), member), ()))

    def find_frame(self, pattern: Pattern, member: str) -> Optional[FrameMatch]:
        hits = self._index.get((join_pattern(pattern), member), ())
        return hits[0] if hits else None

    def class_ids(self) -> Tuple[str, ...]:
        return tuple(self._classes)

    def patterns(self) -> Tuple[str, ...]:
        seen: Dict[str, None] = {}
        for vc in self._classes.values():
            for p in vc.frames:
                seen.setdefault(p, None)
        return tuple(seen)

    def __contains__(self, class_id: object) -> bool:
        return class_id in self._classes

    def __len__(self) -> int:
        return len(self._classes)
