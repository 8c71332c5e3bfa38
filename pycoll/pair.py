from dataclasses import dataclass, field
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class KeyValuePair(Generic[K, V]):
    key: K
    # pairs compare and hash by key only
    value: V = field(compare=False)
