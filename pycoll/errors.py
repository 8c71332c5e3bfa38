class InvalidKeyError(Exception):
    """Raised when a key cannot be hashed into a table (None or unhashable)."""

    def __init__(self, key: object, reason: str = "key is None") -> None:
        super().__init__(f"invalid key {key!r}: {reason}")
        self.key = key


class IndexOutOfRangeError(IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index: {index}, Size: {size}")
        self.index = index
        self.size = size
