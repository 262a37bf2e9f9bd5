import logging
import threading
from pathlib import Path
from typing import Dict, Optional

from behave.parser import ParserError, parse_feature

from gherkin_context.document.model import FeatureTree, from_behave

logger = logging.getLogger(__name__)

_UNPARSED = object()


class DocumentIndex:
    """
    Raw feature text and its parsed tree, per source path.

    Populated on demand and never evicted within a run. A later
    record_source() for the same path replaces the text (last read wins)
    and drops the cached tree.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sources: Dict[str, str] = {}
        self._trees: Dict[str, object] = {}

    def record_source(self, path: str, raw_text: str) -> None:
        with self._lock:
            if self._sources.get(path) != raw_text:
                self._trees.pop(path, None)
            self._sources[path] = raw_text

    def read_source(self, path: str) -> str:
        text = Path(path).read_text(encoding="utf-8")
        self.record_source(path, text)
        return text

    def resolve(self, path: str) -> Optional[FeatureTree]:
        with self._lock:
            raw_text = self._sources.get(path)
            cached = self._trees.get(path, _UNPARSED)

        if raw_text is None:
            logger.warning("No source recorded for %s", path)
            return None
        if cached is not _UNPARSED:
            logger.debug("Using cached tree for %s", path)
            return cached

        tree = self._parse(path, raw_text)
        with self._lock:
            # Another thread may have parsed the same text first; keep theirs.
            if self._sources.get(path) == raw_text:
                tree = self._trees.setdefault(path, tree)
        return tree

    def _parse(self, path: str, raw_text: str) -> Optional[FeatureTree]:
        try:
            feature = parse_feature(raw_text, filename=path)
        except ParserError as e:
            logger.warning("Could not parse %s, treating as no feature: %s", path, e)
            return None
        except Exception as e:
            # behave raises plain errors too, e.g. KeyError for an unknown "# language:".
            logger.warning("Parser failed on %s (%s), treating as no feature: %s", path, type(e).__name__, e)
            return None

        if feature is None:
            logger.warning("No feature found in %s", path)
            return None

        logger.debug("Parsed %s: %d scenario definitions", path, len(feature.scenarios))
        return from_behave(feature, path)
