# src/verbnet/markup.py
from __future__ import annotations

import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Tuple, Union

from .errors import MalformedDocument
from .models import CanonicalNode, Content


# generic tokenizer output: (tag, attrs, children)
SimpleForm = Tuple[Any, Any, Sequence[Any]]


# -----------------------------
# Public API
# -----------------------------

def parse_file(path: str | Path) -> CanonicalNode:
    p = Path(path)
    return parse_document(p.read_bytes(), source=str(p))


def parse_document(data: Union[bytes, str], source: str | None = None) -> CanonicalNode:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedDocument(str(e), source=source) from e
    return normalize(simple_form(root))


def normalize(node: SimpleForm) -> CanonicalNode:
    """
    Turn a generic (tag, attrs, children) node into a CanonicalNode.

    Tags and attribute keys are lower-cased and interned, attribute values
    keep their case. Children that are themselves 3-tuples are recursed into,
    anything else is a text leaf.
    """
    tag, attrs, children = node
    return CanonicalNode(
        tag=to_symbol(tag),
        attributes=_attrs_to_map(attrs),
        children=tuple(_content_item(c) for c in children),
    )


def simple_form(elem: ET.Element) -> SimpleForm:
    """
    ElementTree -> generic form. Text and tail segments become leaf strings in
    document order; whitespace-only segments are formatting and are dropped.
    """
    children: List[Any] = []
    if _has_text(elem.text):
        children.append(elem.text)
    for child in elem:
        children.append(simple_form(child))
        if _has_text(child.tail):
            children.append(child.tail)
    return (elem.tag, list(elem.attrib.items()), children)


# -----------------------------
# Helpers
# -----------------------------

def to_symbol(raw: Any) -> str:
    return sys.intern(_to_str(raw).lower())


def _to_str(raw: Any) -> str:
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("utf-8")
    return str(raw)


def _attrs_to_map(attrs: Any) -> Mapping[str, str]:
    pairs = attrs.items() if isinstance(attrs, Mapping) else attrs
    return {to_symbol(k): _to_str(v) for k, v in pairs}


def _content_item(item: Any) -> Content:
    if isinstance(item, CanonicalNode):
        return item
    if isinstance(item, tuple) and len(item) == 3:
        return normalize(item)
    return _to_str(item)


def _has_text(text: str | None) -> bool:
    return bool(text and text.strip())
