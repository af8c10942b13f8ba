from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence, Mapping, Protocol, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Number = Union[int, float]
Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], Number]


@runtime_checkable
class Collator(Protocol):
    """anything that can order two strings"""

    def compare_strings(self, a: str, b: str) -> int: ...
