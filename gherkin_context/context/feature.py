from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional

from gherkin_context.context.attributes import Attribute, extract_attributes
from gherkin_context.context.identity import CorrelationSlot
from gherkin_context.context.scenario import ExecutionEvent, ExecutionInstance
from gherkin_context.document.index import DocumentIndex
from gherkin_context.document.model import Background, FeatureTree

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class FeatureContext(CorrelationSlot):
    uri: str
    tree: Optional[FeatureTree]
    attributes: FrozenSet[Attribute] = frozenset()

    @classmethod
    def load(cls, index: DocumentIndex, path: str, extractor=extract_attributes) -> "FeatureContext":
        tree = index.resolve(path)
        if tree is None:
            logger.warning("Feature %s is unavailable; its scenarios cannot be resolved", path)
            return cls(uri=path, tree=None)
        return cls(uri=path, tree=tree, attributes=extractor(tree.tags))

    @property
    def available(self) -> bool:
        return self.tree is not None

    @property
    def background(self) -> Optional[Background]:
        return self.tree.background if self.tree is not None else None

    def scenario_context(self, event: ExecutionEvent, resolver) -> ExecutionInstance:
        return resolver.resolve(self.tree, event)

    def _describe(self) -> str:
        return f"feature {self.uri}"
