# src/verbnet/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple, Union


def _frozen_map(m: Mapping) -> Mapping:
    return MappingProxyType(dict(m))


def _map_key(m: Mapping) -> frozenset:
    # order-insensitive, like mapping equality
    return frozenset(m.items())


# ============================================================
# Canonical markup tree
# ============================================================

@dataclass(frozen=True)
class CanonicalNode:
    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["Content", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _frozen_map(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.tag, _map_key(self.attributes), self.children))

    def get(self, key: str, default=None):
        return self.attributes.get(key, default)

    @property
    def nodes(self) -> Tuple["CanonicalNode", ...]:
        return tuple(c for c in self.children if isinstance(c, CanonicalNode))

    @property
    def texts(self) -> Tuple[str, ...]:
        return tuple(c for c in self.children if isinstance(c, str))


Content = Union[CanonicalNode, str]

# restriction trees under a themrole are kept as raw canonical content
SelRestriction = Content


# ============================================================
# VerbNet entities
# ============================================================

@dataclass(frozen=True)
class Frame:
    primary_pattern: str
    description: Mapping[str, str] = field(default_factory=dict)
    examples: Tuple[Tuple[str, ...], ...] = ()
    syntax: Tuple[CanonicalNode, ...] = ()
    semantics: Tuple[CanonicalNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "description", _frozen_map(self.description))
        object.__setattr__(self, "examples", tuple(tuple(e) for e in self.examples))
        object.__setattr__(self, "syntax", tuple(self.syntax))
        object.__setattr__(self, "semantics", tuple(self.semantics))

    def __hash__(self) -> int:
        return hash(
            (self.primary_pattern, _map_key(self.description), self.examples, self.syntax, self.semantics)
        )


# member attributes minus "name" (grouping, wn, ...)
MemberInfo = Mapping[str, str]


@dataclass(frozen=True)
class VerbClass:
    class_id: str
    members: Mapping[str, MemberInfo] = field(default_factory=dict)
    themroles: Mapping[str, Tuple[SelRestriction, ...]] = field(default_factory=dict)
    frames: Mapping[str, Frame] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "members", _frozen_map({k: _frozen_map(v) for k, v in self.members.items()})
        )
        object.__setattr__(
            self, "themroles", _frozen_map({k: tuple(v) for k, v in self.themroles.items()})
        )
        object.__setattr__(self, "frames", _frozen_map(self.frames))

    def __hash__(self) -> int:
        members = frozenset((k, _map_key(v)) for k, v in self.members.items())
        return hash((self.class_id, members, _map_key(self.themroles), _map_key(self.frames)))


class FrameMatch(NamedTuple):
    class_id: str
    frame: Frame
