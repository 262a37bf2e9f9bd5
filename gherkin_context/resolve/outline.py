import logging
import re
import threading
from typing import Dict, Sequence

from gherkin_context.config import DEFAULT_DESIGNATION_PATTERN
from gherkin_context.errors import ExampleArityError

logger = logging.getLogger(__name__)


class OutlineNameSubstitutor:
    """
    Materializes scenario outline instance names and iteration suffixes.

    The suffix memo is keyed by the full run designation, shared by every
    scenario of the run and never evicted.
    """

    def __init__(self, designation_pattern: str = DEFAULT_DESIGNATION_PATTERN) -> None:
        self._strip = re.compile(designation_pattern)
        self._lock = threading.Lock()
        self._iterations: Dict[str, str] = {}

    def substitute(self, template: str, row: Sequence[str], header: Sequence[str]) -> str:
        if len(header) != len(row):
            raise ExampleArityError(
                f"Example row has {len(row)} cells but header has {len(header)} "
                f"(outline: '{template}')"
            )

        values = dict(zip(header, row))
        name = template
        for key, value in values.items():
            token = f"<{key}>"
            if token in name:
                name = name.replace(token, value)
        return name

    def iteration_suffix(self, designation: str) -> str:
        with self._lock:
            cached = self._iterations.get(designation)
            if cached is not None:
                return cached
            suffix = " [" + self._strip.sub("", designation) + "]"
            self._iterations[designation] = suffix

        logger.debug("Iteration suffix %r for %s", suffix, designation)
        return suffix
