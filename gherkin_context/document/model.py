from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from behave import model as behave_model


@dataclass(frozen=True)
class StepDef:
    keyword: str
    text: str
    line: int
    background: bool = False


@dataclass(frozen=True)
class ExampleRow:
    line: int
    cells: Tuple[str, ...]


@dataclass(frozen=True)
class ExampleTable:
    name: str
    header: Tuple[str, ...]
    rows: Tuple[ExampleRow, ...]


@dataclass(frozen=True)
class PlainScenario:
    name: str
    keyword: str
    line: int
    tags: Tuple[str, ...]
    steps: Tuple[StepDef, ...]

    kind = "scenario"


@dataclass(frozen=True)
class ScenarioOutline:
    name: str           # template, may contain <placeholder> tokens
    keyword: str
    line: int
    tags: Tuple[str, ...]
    steps: Tuple[StepDef, ...]
    examples: Tuple[ExampleTable, ...]

    kind = "outline"

    def find_row(self, line: int) -> Optional[Tuple[ExampleTable, ExampleRow]]:
        for table in self.examples:
            for row in table.rows:
                if row.line == line:
                    return table, row
        return None


ScenarioDefinition = Union[PlainScenario, ScenarioOutline]


@dataclass(frozen=True)
class Background:
    keyword: str
    name: str
    line: int
    steps: Tuple[StepDef, ...]


@dataclass(frozen=True)
class FeatureTree:
    path: str
    title: str
    keyword: str
    tags: Tuple[str, ...]
    children: Tuple[ScenarioDefinition, ...]
    background: Optional[Background] = None


def _steps(steps, background: bool = False) -> Tuple[StepDef, ...]:
    return tuple(
        StepDef(keyword=s.keyword, text=s.name, line=s.line, background=background)
        for s in steps or ()
    )


def _example_table(example) -> ExampleTable:
    table = example.table
    if table is None:
        return ExampleTable(name=example.name, header=(), rows=())
    return ExampleTable(
        name=example.name,
        header=tuple(table.headings),
        rows=tuple(ExampleRow(line=row.line, cells=tuple(row.cells)) for row in table.rows),
    )


def _definition(scenario) -> ScenarioDefinition:
    tags = tuple(str(t) for t in scenario.tags)
    if isinstance(scenario, behave_model.ScenarioOutline):
        return ScenarioOutline(
            name=scenario.name,
            keyword=scenario.keyword,
            line=scenario.line,
            tags=tags,
            steps=_steps(scenario.steps),
            examples=tuple(_example_table(e) for e in scenario.examples),
        )
    return PlainScenario(
        name=scenario.name,
        keyword=scenario.keyword,
        line=scenario.line,
        tags=tags,
        steps=_steps(scenario.steps),
    )


def from_behave(feature, path: str) -> FeatureTree:
    """Freeze a parsed behave Feature into a FeatureTree."""
    background = None
    if feature.background is not None:
        bg = feature.background
        background = Background(
            keyword=bg.keyword,
            name=bg.name,
            line=bg.line,
            steps=_steps(bg.steps, background=True),
        )

    return FeatureTree(
        path=path,
        title=feature.name,
        keyword=feature.keyword,
        tags=tuple(str(t) for t in feature.tags),
        # Rule blocks are not walked
        children=tuple(
            _definition(s) for s in feature.scenarios
            if isinstance(s, behave_model.Scenario)
        ),
        background=background,
    )
