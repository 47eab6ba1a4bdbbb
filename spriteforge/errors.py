"""Exceptions raised by the engine."""


class IllegalOperationError(RuntimeError):
    """Raised when a resource or operation breaks the engine's structural rules."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message