# src/verbnet/__init__.py
from .errors import (
    CorpusIntegrityError,
    CorpusTimeoutError,
    MalformedDocument,
    UnknownClass,
    VerbNetError,
)
from .extract import extract_classes, extract_frame, extract_section, extract_sections
from .index import VerbNet, build_frame_index
from .loader import CorpusConfig, load_config_yaml, load_corpus, load_corpus_from_config
from .markup import normalize, parse_document, parse_file
from .models import CanonicalNode, Frame, FrameMatch, VerbClass

__all__ = [
    "CanonicalNode",
    "CorpusConfig",
    "CorpusIntegrityError",
    "CorpusTimeoutError",
    "Frame",
    "FrameMatch",
    "MalformedDocument",
    "UnknownClass",
    "VerbClass",
    "VerbNet",
    "VerbNetError",
    "build_frame_index",
    "extract_classes",
    "extract_frame",
    "extract_section",
    "extract_sections",
    "load_config_yaml",
    "load_corpus",
    "load_corpus_from_config",
    "normalize",
    "parse_document",
    "parse_file",
]
