from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional


@dataclass(frozen=True)
class Attribute:
    key: Optional[str]
    value: str


def extract_attributes(tags: Iterable[str], separator: str = ":") -> FrozenSet[Attribute]:
    """
    "@priority:high" -> Attribute("priority", "high")
    "@smoke"         -> Attribute(None, "smoke")
    """
    attributes = set()
    for tag in tags or ():
        text = str(tag).strip().lstrip("@")
        if not text:
            continue
        key, sep, value = text.partition(separator)
        if sep and key and value:
            attributes.add(Attribute(key=key, value=value))
        else:
            attributes.add(Attribute(key=None, value=text))
    return frozenset(attributes)
