# src/verbnet/loader.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml

from .errors import CorpusIntegrityError, CorpusTimeoutError
from .extract import extract_classes
from .markup import parse_file
from .models import VerbClass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusConfig:
    path: Path
    pattern: str = "*.xml"
    workers: Optional[int] = None
    timeout: Optional[float] = None
    strict_frames: bool = False


# -----------------------------
# Public API
# -----------------------------

def load_config_yaml(path: str | Path) -> CorpusConfig:
    p = Path(path)
    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("config must be a mapping at top-level")

    corpus = raw.get("corpus", {}) or {}
    if not isinstance(corpus, dict):
        raise ValueError("corpus must be mapping")
    build = raw.get("build", {}) or {}
    if not isinstance(build, dict):
        raise ValueError("build must be mapping")

    cpath = corpus.get("path")
    if not isinstance(cpath, str) or not cpath:
        raise ValueError("corpus.path must be non-empty string")
    pattern = corpus.get("pattern", "*.xml")
    if not isinstance(pattern, str) or not pattern:
        raise ValueError("corpus.pattern must be non-empty string")

    workers = build.get("workers", None)
    if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers < 1):
        raise ValueError("build.workers must be a positive integer")
    timeout = build.get("timeout", None)
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
        raise ValueError("build.timeout must be a positive number of seconds")
    strict = build.get("strict_frames", False)
    if not isinstance(strict, bool):
        raise ValueError("build.strict_frames must be bool")

    # relative corpus paths are anchored at the config file
    corpus_dir = Path(cpath)
    if not corpus_dir.is_absolute():
        corpus_dir = p.parent / corpus_dir

    return CorpusConfig(
        path=corpus_dir,
        pattern=pattern,
        workers=workers,
        timeout=float(timeout) if timeout is not None else None,
        strict_frames=strict,
    )


def discover(directory: str | Path, pattern: str = "*.xml") -> List[Path]:
    d = Path(directory)
    if not d.is_dir():
        raise CorpusIntegrityError(f"corpus directory not found: {d}")
    paths = sorted(p for p in d.glob(pattern) if p.is_file())
    if not paths:
        raise CorpusIntegrityError(f"no documents matching {pattern!r} under {d}")
    return paths


def load_document(path: str | Path, *, strict: bool = False) -> List[VerbClass]:
    logger.debug("extracting %s", path)
    root = parse_file(path)
    try:
        return extract_classes(root, strict=strict)
    except CorpusIntegrityError as e:
        raise CorpusIntegrityError(f"{path}: {e}") from e


def load_corpus(
    directory: str | Path,
    *,
    pattern: str = "*.xml",
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
    strict: bool = False,
) -> List[VerbClass]:
    """
    Parse and extract every document under `directory`.

    Documents are processed on a thread pool; every result is awaited before
    returning. Any failure (malformed XML, integrity error, timeout) aborts the
    whole load. The returned list follows file-name order.

    On timeout the error is raised immediately, but a worker thread already
    running the stuck document cannot be interrupted: it keeps running in the
    background, and interpreter exit still joins it. Callers that must exit
    promptly after a failed build should terminate the process (os._exit or
    a supervising process) rather than return normally.
    """
    paths = discover(directory, pattern)
    logger.info("loading %d VerbNet documents from %s", len(paths), directory)

    classes: List[VerbClass] = []
    executor = ThreadPoolExecutor(max_workers=workers)
    futures = [executor.submit(load_document, p, strict=strict) for p in paths]
    try:
        for path, fut in zip(paths, futures):
            try:
                classes.extend(fut.result(timeout=timeout))
            except FutureTimeout as e:
                raise CorpusTimeoutError(f"{path}: extraction exceeded {timeout}s") from e
    except BaseException:
        # don't wait on a stuck document
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown()

    logger.info("extracted %d classes from %d documents", len(classes), len(paths))
    return classes


def load_corpus_from_config(config: CorpusConfig | str | Path) -> List[VerbClass]:
    cfg = config if isinstance(config, CorpusConfig) else load_config_yaml(config)
    return load_corpus(
        cfg.path,
        pattern=cfg.pattern,
        workers=cfg.workers,
        timeout=cfg.timeout,
        strict=cfg.strict_frames,
    )
