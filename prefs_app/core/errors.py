"""Shared error types.

The goal is to make errors explicit and easy to handle at the UI boundary.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """Base error for application-level failures."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:  # pragma: no cover
        if self.cause is None:
            return self.message
        return f"{self.message} (cause: {self.cause})"


class SchemaError(AppError):
    """Settings key not declared in the schema. Packaging defect, not recoverable."""


class SettingsStoreError(AppError):
    """Settings store could not be opened (schema missing or backend unusable)."""


class ResourceLoadError(AppError):
    """Page resource missing, malformed, or without a ``root`` element."""


class CapabilityUnavailable(AppError):
    """Page container lacks the titled-page capability; callers fall back to append."""
