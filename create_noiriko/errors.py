"""Exceptions raised by create-noiriko."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every error the scaffolder raises on purpose."""


class TemplateCollisionError(ScaffoldError):
    """Raised when two resolvers emit the same non-mergeable path in one run."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Template path emitted more than once: {path}")


class InstallError(ScaffoldError):
    """Raised when the package manager install step fails."""

    def __init__(self, message: str, command: str = "", returncode: int | None = None) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(message)


class PromptCancelled(ScaffoldError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)
