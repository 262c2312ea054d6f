"""Errors raised while assembling the forum's components."""


class UtilError(Exception):
    """Base error for wiring and startup problems, never for forum content."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches what the container was asked for."""

    def __init__(self, component: str, mock: bool):
        self.component = component
        self.mock = mock
        kind = "mock" if mock else "production"
        super().__init__(f"No {kind} implementation for {component}")
