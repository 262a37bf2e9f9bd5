from __future__ import annotations

import logging
from typing import Callable, FrozenSet, Iterable, Optional

from gherkin_context.context.attributes import Attribute, extract_attributes
from gherkin_context.context.scenario import ExecutionEvent, ExecutionInstance
from gherkin_context.document.model import (
    Background,
    FeatureTree,
    ScenarioDefinition,
    ScenarioOutline,
)
from gherkin_context.errors import FeatureUnavailableError, StructuralMismatchError
from gherkin_context.resolve.outline import OutlineNameSubstitutor

logger = logging.getLogger(__name__)

Extractor = Callable[[Iterable[str]], FrozenSet[Attribute]]


class ScenarioResolver:
    """
    Correlates runtime scenario events with the parsed document.

    There is no shared identifier between the two: plain scenarios match
    on line + name, outline instances on the example row's line alone.
    """

    def __init__(
        self,
        substitutor: Optional[OutlineNameSubstitutor] = None,
        extractor: Extractor = extract_attributes,
    ) -> None:
        self.substitutor = substitutor or OutlineNameSubstitutor()
        self.extractor = extractor

    def match_scenario(self, feature: Optional[FeatureTree], line: int, name: str) -> ScenarioDefinition:
        if feature is None:
            raise FeatureUnavailableError(
                f"No parsed feature available to match scenario '{name}' (line {line})"
            )

        for scenario in feature.children:
            if scenario.line == line and scenario.name == name:
                return scenario
            if isinstance(scenario, ScenarioOutline) and scenario.find_row(line) is not None:
                return scenario

        raise StructuralMismatchError(
            f"No scenario in {feature.path} matches '{name}' at line {line}"
        )

    def build_execution_instance(
        self,
        scenario: ScenarioDefinition,
        event: ExecutionEvent,
        background: Optional[Background] = None,
    ) -> ExecutionInstance:
        name = scenario.name
        line = scenario.line
        iteration = None
        row = None

        if isinstance(scenario, ScenarioOutline):
            # Matched on the outline's own line + name: no row, template name kept.
            found = scenario.find_row(event.line)
            if found is not None:
                table, row = found
                name = self.substitutor.substitute(scenario.name, row.cells, table.header)
            designation = event.designation or f"{event.source_path}:{event.line}"
            iteration = self.substitutor.iteration_suffix(designation)
            line = event.line

        instance = ExecutionInstance(
            name=name,
            keyword=scenario.keyword,
            line=line,
            attributes=self.extractor(event.tags),
            background=background,
            iteration=iteration,
            outline_row=row,
        )

        for step in scenario.steps:
            instance.step_map[step.line] = step
        if background is not None:
            for step in background.steps:
                instance.step_map[step.line] = step
                instance.background_queue.append(step)

        logger.debug(
            "Resolved '%s' at %s:%d (%d steps indexed)",
            instance.name, event.source_path, instance.line, len(instance.step_map),
        )
        return instance

    def resolve(self, feature: Optional[FeatureTree], event: ExecutionEvent) -> ExecutionInstance:
        scenario = self.match_scenario(feature, event.line, event.name)
        return self.build_execution_instance(scenario, event, feature.background)
