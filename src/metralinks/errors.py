"""Exceptions raised by metralinks."""


class MetraLinksError(Exception):
    """Base class for all metralinks errors."""


class ConfigurationError(MetraLinksError, ValueError):
    """Raised for a day value or offset the date rules cannot handle."""


class ContainerNotFoundError(MetraLinksError, KeyError):
    """Raised when a link is rendered into a container the page doesn't have."""

    def __init__(self, container_id: str):
        super().__init__(container_id)
        self.container_id = container_id

    def __str__(self) -> str:
        return f"No container with id '{self.container_id}' on the page"


class ContainerFullError(MetraLinksError):
    """Raised when a single-slot container already holds a link."""
