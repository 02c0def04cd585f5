"""Custom exceptions for TaskFlow."""


class TaskFlowError(Exception):
    """Base exception for all TaskFlow errors."""


class ValidationError(TaskFlowError, ValueError):
    """Raised when task input (text or priority) is invalid."""


class PersistenceError(TaskFlowError):
    """Base for failures talking to the key-value store."""


class PersistenceReadError(PersistenceError):
    """Stored task data could not be read or parsed."""


class PersistenceWriteError(PersistenceError):
    """Task data could not be serialized or written."""


class TaskNotFoundError(TaskFlowError, LookupError):
    """Raised when no task matches a given ID or prefix."""


class AmbiguousTaskIdError(TaskFlowError, LookupError):
    """Raised when an ID prefix matches more than one task."""

    def __init__(self, prefix: str, matches: list[str]):
        super().__init__(
            f"Multiple tasks match '{prefix}': " + ", ".join(sorted(matches))
        )
        self.prefix = prefix
        self.matches = matches
