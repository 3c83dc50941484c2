"""Checker exceptions: invocation failures and lookup failures."""

from __future__ import annotations

from enum import Enum, auto

from themereport.domain.exceptions.base import ThemeReportError


class InvocationErrorKind(Enum):
    """Why the checker could not produce a result."""

    NOT_A_DIRECTORY = auto()  # directory mode on a file, likely a zip
    OTHER = auto()


class CheckerInvocationError(ThemeReportError):
    """Checker failed before producing a theme result.

    Attributes:
        path: Theme path passed to the checker
        kind: Classified failure kind
        message: Underlying error text
        hint: Corrective suggestion for the user, if any
    """

    def __init__(
        self,
        path: str,
        kind: InvocationErrorKind,
        message: str,
        hint: str | None = None,
    ) -> None:
        self.path = path
        self.kind = kind
        self.message = message
        self.hint = hint
        super().__init__(message)


class CheckerNotFoundError(ThemeReportError):
    """No checker is registered under the requested name.

    Attributes:
        name: Requested checker name (must not be empty)
        available: Registered checker names
    """

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        # FAIL-FIRST validation
        if not name:
            raise ValueError("name must not be empty")

        self.name = name
        self.available = available
        listed = ", ".join(available) if available else "none installed"
        super().__init__(f"Unknown checker '{name}'. Available: {listed}")


class CheckerLoadError(ThemeReportError):
    """A registered checker could not be loaded.

    Attributes:
        name: Checker name (must not be empty)
        reason: Why loading failed (must not be empty)
    """

    def __init__(self, name: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not name:
            raise ValueError("name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.name = name
        self.reason = reason
        super().__init__(f"Cannot load checker '{name}': {reason}")
