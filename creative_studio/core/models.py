from enum import Enum
from dataclasses import dataclass, field
from typing import List, Any


class Tone(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    EXCITING = "exciting"
    TRUSTWORTHY = "trustworthy"


class RecordStatus(str, Enum):
    # Only variant in use; reads filter on it so a retired state can be added later.
    ACTIVE = "active"


@dataclass
class Listing:
    """Result of a read that may be served from an unavailable store.

    ``available`` is False when the store could not be queried; ``items`` is
    then empty. Callers decide whether to mask that as "no data".
    """
    items: List[Any] = field(default_factory=list)
    available: bool = True

    @classmethod
    def unavailable(cls) -> "Listing":
        return cls(items=[], available=False)
