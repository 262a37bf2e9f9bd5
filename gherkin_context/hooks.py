from __future__ import annotations

import functools
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, List, Optional

from gherkin_context.config import Settings, load_settings
from gherkin_context.context.attributes import Attribute, extract_attributes
from gherkin_context.context.feature import FeatureContext
from gherkin_context.context.scenario import ExecutionEvent, ExecutionInstance
from gherkin_context.document.index import DocumentIndex
from gherkin_context.resolve.outline import OutlineNameSubstitutor
from gherkin_context.resolve.resolver import ScenarioResolver

logger = logging.getLogger(__name__)


@dataclass
class StartedItem:
    kind: str                 # "feature" | "scenario" | "step"
    id: Any
    parent_id: Any
    name: str
    attributes: FrozenSet[Attribute] = frozenset()
    line: Optional[int] = None
    text: str = ""


def mint_id(**_: Any) -> str:
    return str(uuid.uuid4())


def designation_for(scenario) -> str:
    return f"{scenario.filename}:{scenario.line} # {scenario.name}"


class ContextTracker:
    """
    Drives the resolution core from behave's environment hooks.

    Call the hook methods from features/environment.py. Every started
    feature, scenario and step is recorded in `items` with the handle
    returned by `start_item`.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        index: Optional[DocumentIndex] = None,
        resolver: Optional[ScenarioResolver] = None,
        start_item: Callable[..., Any] = mint_id,
    ) -> None:
        self.settings = settings or load_settings()
        self.extractor = functools.partial(
            extract_attributes, separator=self.settings.attribute_separator
        )
        self.index = index or DocumentIndex()
        self.resolver = resolver or ScenarioResolver(
            substitutor=OutlineNameSubstitutor(self.settings.designation_pattern),
            extractor=self.extractor,
        )
        self.start_item = start_item
        self.items: List[StartedItem] = []
        self.feature: Optional[FeatureContext] = None
        self.scenario: Optional[ExecutionInstance] = None

    def _start(self, item: StartedItem, **extra: Any) -> Any:
        item.id = self.start_item(
            kind=item.kind,
            name=item.name,
            parent=item.parent_id,
            attributes=item.attributes,
            **extra,
        )
        self.items.append(item)
        return item.id

    def before_feature(self, context, feature) -> FeatureContext:
        path = str(feature.filename)
        self.index.read_source(path)
        self.feature = FeatureContext.load(self.index, path, self.extractor)

        item = StartedItem(
            kind="feature",
            id=None,
            parent_id=None,
            name=f"{feature.keyword}: {feature.name}",
            attributes=self.feature.attributes,
            line=feature.line,
        )
        self.feature.set_id(self._start(item, uri=path))
        return self.feature

    def before_scenario(self, context, scenario) -> ExecutionInstance:
        if self.feature is None:
            raise RuntimeError("before_scenario called outside of a feature")

        event = ExecutionEvent(
            source_path=str(scenario.filename),
            line=scenario.line,
            name=scenario.name,
            tags=tuple(str(t) for t in scenario.tags or ()),
            designation=designation_for(scenario),
        )
        instance = self.feature.scenario_context(event, self.resolver)

        name = instance.name + (instance.iteration or "")
        item = StartedItem(
            kind="scenario",
            id=None,
            parent_id=self.feature.id,
            name=f"{instance.keyword}: {name}",
            attributes=instance.attributes,
            line=instance.line,
        )
        instance.set_id(self._start(item, uri=f"{self.feature.uri}:{instance.line}"))
        logger.debug("Started %s as %r", item.name, instance.id)
        self.scenario = instance
        return instance

    def before_step(self, context, step) -> StartedItem:
        if self.scenario is None:
            raise RuntimeError("before_step called outside of a scenario")

        source = self.scenario.lookup_step(step.line)
        text = f"{self.scenario.step_prefix()}{source.keyword} {step.name}"
        item = StartedItem(
            kind="step",
            id=None,
            parent_id=self.scenario.id,
            name=text,
            line=source.line,
            text=text,
        )
        self._start(item)
        return item

    def after_step(self, context, step) -> None:
        if self.scenario is None:
            raise RuntimeError("after_step called outside of a scenario")
        if self.scenario.lookup_step(step.line).background:
            self.scenario.consume_next_background_step()

    def after_scenario(self, context, scenario) -> None:
        self.scenario = None

    def after_feature(self, context, feature) -> None:
        self.feature = None

    def last(self, kind: str) -> Optional[StartedItem]:
        for item in reversed(self.items):
            if item.kind == kind:
                return item
        return None
