"""Exceptions raised by switchyard domain objects."""


class SwitchyardError(RuntimeError):
    """Base class for domain exceptions."""


class InvalidCommandState(SwitchyardError):
    """Raised when a command operation is called out of order."""


class NoDocumentOpen(SwitchyardError):
    """Raised when the editor is asked to act without an open document."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation}: no document is open")
        self.operation = operation
