"""Type definitions for seqlist."""

import enum
from typing import Final, TypeVar, Union

# Generic type variable for stored values
V = TypeVar("V")


class Absent(enum.Enum):
    """Marker returned when there is no value to hand back.

    Distinct from ``None`` so that a list holding ``None`` can still tell
    "removed a None" apart from "nothing to remove".
    """

    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent.ABSENT

# Return type of operations that may come back empty-handed
Maybe = Union[V, Absent]
