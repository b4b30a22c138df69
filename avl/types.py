from typing import Any, TypeVar, Protocol


class Comparable(Protocol):
    """anything with a strict total order"""

    def __lt__(self, other: Any) -> bool:
        ...


T = TypeVar("T", bound=Comparable)
