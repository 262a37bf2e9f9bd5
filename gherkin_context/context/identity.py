from typing import Any

from gherkin_context.errors import IdentifierAlreadySetError

_UNSET = object()


class CorrelationSlot:
    """Holds an externally minted correlation handle; assignable exactly once."""

    _id: Any = _UNSET

    @property
    def id(self) -> Any:
        return None if self._id is _UNSET else self._id

    @property
    def has_id(self) -> bool:
        return self._id is not _UNSET

    def set_id(self, handle: Any) -> None:
        if self._id is not _UNSET:
            raise IdentifierAlreadySetError(
                f"Attempting to re-set id of {self._describe()} (current: {self._id!r})"
            )
        self._id = handle

    def _describe(self) -> str:
        return type(self).__name__
