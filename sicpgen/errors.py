"""Error taxonomy for exercise scaffolding.

Every error raised by the library derives from ``SicpGenError`` and carries a
human-readable ``message``.  The CLI entry point catches ``SicpGenError``,
prints the message and exits with a non-zero status; nothing below it
recovers from these errors.
"""

from __future__ import annotations

from pathlib import Path


class SicpGenError(Exception):
    """Base exception for all sicpgen errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class GenerationError(SicpGenError):
    """Raised when an exercise directory cannot be generated."""


class RootNotFound(GenerationError):
    """The root directory supplied by the caller does not exist."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(f"Path provided ({root}) doesn't exist")


class ExerciseAlreadyExists(GenerationError):
    """The target exercise directory is already present on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Exercise {path} already exists")


class MalformedIdentifier(GenerationError):
    """The identifier does not split into ``<chapter>-<exercise>``."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"Malformed exercise identifier {identifier!r}: expected <chapter>-<exercise>"
        )


class IoFailure(GenerationError):
    """A filesystem operation failed while generating an exercise."""

    def __init__(self, operation: str, path: Path, cause: OSError) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to {operation} {path}: {cause}")


class TemplateRenderError(GenerationError):
    """A template could not be rendered with the supplied context."""

    def __init__(self, template_name: str, cause: Exception) -> None:
        self.template_name = template_name
        self.cause = cause
        super().__init__(f"Failed to render template {template_name}: {cause}")


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------


class TemplateLoadError(SicpGenError):
    """Templates failed validation at startup."""

    def __init__(self, template_dir: Path, detail: str) -> None:
        self.template_dir = template_dir
        self.detail = detail
        super().__init__(f"Failed to load templates from {template_dir}: {detail}")


# ---------------------------------------------------------------------------
# Testing
# ---------------------------------------------------------------------------


class TestingError(SicpGenError):
    """Reserved failure type for the ``test`` command."""

    __test__ = False  # not a pytest test class

    def __init__(self) -> None:
        super().__init__("Failed to run test suite")
