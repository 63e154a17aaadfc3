"""Exceptions raised by interface-mock.

Malformed interface text is not an error: the parser skips what it cannot
read. Only the cases below are surfaced to callers.
"""


class InterfaceMockError(Exception):
    """Base class for all interface-mock errors."""


class InvalidInterfaceInput(InterfaceMockError, TypeError):
    """Raised when the parser is handed something that is not a string."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Interface source must be a string, got {type(value).__name__}"
        )


class InvalidInterfaceError(InterfaceMockError, ValueError):
    """Raised when a project is created or updated with unusable interface text."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid TypeScript interface: {reason}")


class ProjectNotFoundError(InterfaceMockError, LookupError):
    """Raised when a project id is unknown, deactivated or expired."""

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__("Project not found or expired")


class InvalidCountError(InterfaceMockError, ValueError):
    """Raised when a requested record count is not an integer in range."""

    def __init__(self, raw: object, maximum: int) -> None:
        self.raw = raw
        self.maximum = maximum
        super().__init__(f"count must be an integer between 1 and {maximum}, got {raw!r}")


class RegistryFullError(InterfaceMockError):
    """Raised when the registry already holds its maximum of active projects."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Active project limit reached ({limit})")


class InvalidProjectUpdateError(InterfaceMockError, ValueError):
    """Raised when a project update carries values that do not validate."""

    def __init__(self, project_id: str, reason: str) -> None:
        self.project_id = project_id
        self.reason = reason
        super().__init__(f"Invalid update for project {project_id}: {reason}")
