from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, FrozenSet, Optional, Tuple

from gherkin_context.context.attributes import Attribute
from gherkin_context.context.identity import CorrelationSlot
from gherkin_context.document.model import Background, ExampleRow, StepDef
from gherkin_context.errors import StepNotIndexedError

COLON_INFIX = ": "


@dataclass(frozen=True)
class ExecutionEvent:
    source_path: str
    line: int
    name: str
    tags: Tuple[str, ...] = ()
    designation: str = ""   # host-specific run designation, e.g. "a.feature:10 # Add"


@dataclass(eq=False)
class ExecutionInstance(CorrelationSlot):
    """
    One runtime occurrence of a scenario (one per example row for outlines).
    Owned by a single scenario run; never shared.
    """

    name: str
    keyword: str
    line: int
    attributes: FrozenSet[Attribute] = frozenset()
    background: Optional[Background] = None
    iteration: Optional[str] = None
    outline_row: Optional[ExampleRow] = None
    step_map: Dict[int, StepDef] = field(default_factory=dict)
    background_queue: Deque[StepDef] = field(default_factory=deque)

    def lookup_step(self, step_line: int) -> StepDef:
        step = self.step_map.get(step_line)
        if step is None:
            raise StepNotIndexedError(
                f"Trying to get step for unknown line in feature. "
                f"Scenario: {self.name}, line: {self.line}, step line: {step_line}"
            )
        return step

    def consume_next_background_step(self) -> None:
        if self.background_queue:
            self.background_queue.popleft()

    def has_pending_background_steps(self) -> bool:
        return bool(self.background_queue)

    def has_background(self) -> bool:
        return self.background is not None

    def step_prefix(self) -> str:
        if self.has_background() and self.has_pending_background_steps():
            return self.background.keyword.upper() + COLON_INFIX
        return ""

    def _describe(self) -> str:
        return f"scenario '{self.name}' (line {self.line})"
