"""Exercise identifiers and their on-disk location.

An identifier such as ``"1-12"`` names chapter ``1``, exercise ``12``.  The
exercise always lives at ``<root>/chapter-<chapter>/exercise-<exercise>``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import MalformedIdentifier

IDENTIFIER_SEPARATOR = "-"
# Segments become directory names, so they may not contain path separators.
FORBIDDEN_SEGMENT_CHARS = frozenset("/\\")


class Exercise(BaseModel):
    """A single chapter/exercise pair located under a root directory."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(..., description="Directory that holds the chapter folders")
    chapter: str = Field(..., min_length=1)
    exercise: str = Field(..., min_length=1)

    @field_validator("chapter", "exercise")
    @classmethod
    def _check_segment(cls, value: str) -> str:
        if not _is_valid_segment(value):
            raise ValueError(f"Invalid path segment: {value!r}")
        return value

    @property
    def path(self) -> Path:
        """Directory of this exercise, derived from root, chapter and exercise."""
        return self.root / f"chapter-{self.chapter}" / f"exercise-{self.exercise}"

    def template_context(self) -> dict[str, str]:
        """Variables available to the README template."""
        return {"chapter": self.chapter, "exercise": self.exercise}

    def __str__(self) -> str:
        return f"chapter {self.chapter} exercise {self.exercise}"


def parse_identifier(identifier: str) -> tuple[str, str]:
    """Split ``"<chapter>-<exercise>"`` into its two segments.

    Raises:
        MalformedIdentifier: If there are not exactly two non-empty segments,
            or a segment contains a path separator.
    """
    parts = identifier.split(IDENTIFIER_SEPARATOR)
    if len(parts) != 2 or not all(_is_valid_segment(part) for part in parts):
        raise MalformedIdentifier(identifier)
    chapter, exercise = parts
    return chapter, exercise


def locate(root: str | Path, identifier: str) -> Exercise:
    """Parse *identifier* and locate the exercise under *root*.

    Pure computation: *root* is not required to exist.
    """
    chapter, exercise = parse_identifier(identifier)
    return Exercise(root=Path(root), chapter=chapter, exercise=exercise)


def _is_valid_segment(segment: str) -> bool:
    return bool(segment) and not FORBIDDEN_SEGMENT_CHARS.intersection(segment)
