# src/verbnet/extract.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import CorpusIntegrityError
from .models import CanonicalNode, Content, Frame, VerbClass

logger = logging.getLogger(__name__)


# -----------------------------
# Public API
# -----------------------------

def extract_classes(node: CanonicalNode, *, strict: bool = False) -> List[VerbClass]:
    """
    Extract a vnclass node and, recursively, every nested subclass.

    The result is flat and in document order: the class itself first, then each
    subclass followed by its own descendants. The hierarchy is not kept.
    """
    class_id = node.get("id")
    if not class_id:
        raise CorpusIntegrityError(f"<{node.tag}> without id attribute")

    try:
        sections = extract_sections(node.children, strict=strict, owner=class_id)
    except CorpusIntegrityError as e:
        raise CorpusIntegrityError(f"{class_id}: {e}") from e

    vc = VerbClass(
        class_id=class_id,
        members=sections.get("members") or {},
        themroles=sections.get("themroles") or {},
        frames=sections.get("frames") or {},
    )

    out = [vc]
    for sub in sections.get("subclasses") or ():
        out.extend(extract_classes(sub, strict=strict))
    return out


def extract_sections(
    children: Iterable[Content], *, strict: bool = False, owner: Optional[str] = None
) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for child in _nodes(children):
        out[child.tag] = extract_section(child, strict=strict, owner=owner)
    return out


def extract_section(node: CanonicalNode, *, strict: bool = False, owner: Optional[str] = None) -> Any:
    tag = node.tag
    if tag == "members":
        return _members(node)
    if tag == "themroles":
        return _themroles(node)
    if tag == "frames":
        return _frames(node, strict=strict, owner=owner)
    if tag == "subclasses":
        return list(_nodes(node.children))
    if tag == "description":
        return dict(node.attributes)
    if tag == "examples":
        return [ex.texts[:1] for ex in _nodes(node.children) if ex.tag == "example"]
    if tag in ("syntax", "semantics"):
        return list(_nodes(node.children))
    # unknown sections are dropped
    return {}


def extract_frame(children: Iterable[Content], *, strict: bool = False) -> Tuple[str, Frame]:
    sections = extract_sections(children, strict=strict)
    description = sections.get("description")
    if not description:
        raise CorpusIntegrityError("frame without description")
    primary = description.get("primary")
    if primary is None:
        raise CorpusIntegrityError("frame description without primary attribute")

    frame = Frame(
        primary_pattern=primary,
        description=description,
        examples=sections.get("examples") or (),
        syntax=sections.get("syntax") or (),
        semantics=sections.get("semantics") or (),
    )
    return primary, frame


# -----------------------------
# Sections
# -----------------------------

def _members(node: CanonicalNode) -> Mapping[str, Mapping[str, str]]:
    out: Dict[str, Mapping[str, str]] = {}
    for m in _nodes(node.children):
        if m.tag != "member":
            continue
        name = m.get("name")
        if name is None:
            raise CorpusIntegrityError("member without name attribute")
        out[name] = {k: v for k, v in m.attributes.items() if k != "name"}
    return out


def _themroles(node: CanonicalNode) -> Mapping[str, Tuple[Content, ...]]:
    out: Dict[str, Tuple[Content, ...]] = {}
    for r in _nodes(node.children):
        if r.tag != "themrole":
            continue
        rtype = r.get("type")
        if rtype is None:
            raise CorpusIntegrityError("themrole without type attribute")
        out[rtype] = r.children
    return out


def _frames(node: CanonicalNode, *, strict: bool, owner: Optional[str]) -> Mapping[str, Frame]:
    out: Dict[str, Frame] = {}
    for f in _nodes(node.children):
        if f.tag != "frame":
            continue
        primary, frame = extract_frame(f.children, strict=strict)
        if primary in out:
            if strict:
                raise CorpusIntegrityError(f"duplicate frame pattern {primary!r}")
            logger.warning(
                "%s: duplicate frame pattern %r, keeping the later frame", owner or "<frames>", primary
            )
        out[primary] = frame
    return out


def _nodes(children: Iterable[Content]) -> Iterable[CanonicalNode]:
    return (c for c in children if isinstance(c, CanonicalNode))
