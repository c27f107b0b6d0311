"""Exercise scaffolding orchestrator.

Takes a root directory and a ``<chapter>-<exercise>`` identifier and creates
the exercise directory with a rendered README and a Racket test stub::

    <root>/chapter-<chapter>/exercise-<exercise>/README.md
    <root>/chapter-<chapter>/exercise-<exercise>/test.rkt

Generation refuses to touch an exercise that already exists.  Nothing is
created before the preconditions pass; a failure while writing leaves the
directory as far as it got.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

from .config import Config
from .errors import ExerciseAlreadyExists, IoFailure, RootNotFound
from .exercise import Exercise, locate
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Anything that can turn a named template and a context into text."""

    def render(self, template_name: str, context: dict[str, Any]) -> str: ...


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ExerciseGenerator:
    """Creates exercise directories from the configured templates."""

    def __init__(self, renderer: Renderer, config: Config | None = None) -> None:
        self.renderer = renderer
        self.config = config or Config()

    # -- Public API --------------------------------------------------------

    def generate(self, root: str | Path, identifier: str) -> Exercise:
        """Generate the exercise named by *identifier* under *root*.

        Returns:
            The located ``Exercise`` once both files are written.

        Raises:
            RootNotFound: *root* does not exist.
            MalformedIdentifier: *identifier* is not ``<chapter>-<exercise>``.
            ExerciseAlreadyExists: the exercise directory is already present.
            IoFailure: a directory or file could not be created.
            TemplateRenderError: a template failed to render.
        """
        root = Path(root)
        if not _exists(root):
            raise RootNotFound(root)

        exercise = locate(root, identifier)
        if _exists(exercise.path):
            raise ExerciseAlreadyExists(exercise.path)

        logger.info("Generating %s in %s", exercise, exercise.path)
        self._create_directory(exercise.path)
        self._render_readme(exercise)
        self._render_test(exercise)
        return exercise

    def written_files(self, exercise: Exercise) -> list[Path]:
        """Paths of the files ``generate`` writes for *exercise*."""
        return [
            exercise.path / self.config.readme_filename,
            exercise.path / self.config.test_filename,
        ]

    # -- Steps ---------------------------------------------------------------

    def _create_directory(self, path: Path) -> None:
        try:
            path.mkdir(parents=True)
        except OSError as exc:
            raise IoFailure("create directory", path, exc) from exc

    def _render_readme(self, exercise: Exercise) -> None:
        content = self.renderer.render(
            self.config.readme_template, exercise.template_context()
        )
        _write_file(exercise.path / self.config.readme_filename, content)

    def _render_test(self, exercise: Exercise) -> None:
        content = self.renderer.render(self.config.test_template, {})
        _write_file(exercise.path / self.config.test_filename, content)


def generate(
    root: str | Path, identifier: str, renderer: Renderer | None = None
) -> Exercise:
    """Generate one exercise using the packaged templates.

    When *renderer* is omitted a ``TemplateRenderer`` is built and validated
    with ``load`` first.
    """
    config = Config()
    if renderer is None:
        template_renderer = TemplateRenderer(config.template_dir)
        template_renderer.load(config.required_templates)
        renderer = template_renderer
    return ExerciseGenerator(renderer, config).generate(root, identifier)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _exists(path: Path) -> bool:
    """True for anything at *path*, including a dangling symlink."""
    try:
        return path.is_symlink() or path.exists()
    except OSError as exc:
        raise IoFailure("inspect", path, exc) from exc


def _write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise IoFailure("write", path, exc) from exc
    logger.debug("Wrote %s", path)
