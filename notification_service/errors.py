"""Errors raised by the notification package."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for notification errors."""


class InvalidArgumentError(NotificationError, ValueError):
    """A notification argument was missing or empty."""

    def __init__(self, field_name: str, message: str | None = None) -> None:
        super().__init__(message or f"{field_name.capitalize()} cannot be empty")
        self.field_name = field_name


class NullDependencyError(InvalidArgumentError):
    """A required collaborator was not supplied at construction."""

    def __init__(self, field_name: str) -> None:
        super().__init__(field_name, f"Value cannot be null: {field_name}")
