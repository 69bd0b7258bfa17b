"""exceptions raised by the math store lifecycle."""


class MathStoreError(RuntimeError):
    """base class for math store failures."""


class StoreNotInitializedError(MathStoreError):
    """raised when math is restored before any math was removed."""

    def __init__(self) -> None:
        super().__init__("math store not initialized: call remove_math first")


class StoreConsumedError(MathStoreError):
    """raised when a math store is reused after its round-trip."""

    def __init__(self) -> None:
        super().__init__("math store already used for a document round-trip")


class DanglingPlaceholderError(MathStoreError):
    """raised when a placeholder has no matching store entry."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"dangling placeholder @@{index}@@: store holds {size} entr"
            f"{'y' if size == 1 else 'ies'}"
        )
        self.index = index
        self.size = size
