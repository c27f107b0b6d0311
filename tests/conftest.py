"""Shared pytest fixtures for the sicpgen test suite.

Provides reusable fixtures for:
- Temporary exercise roots
- A loaded renderer over the bundled templates
- A recording fake renderer
- Template directories with custom content
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from sicpgen.config import Config
from sicpgen.generator import ExerciseGenerator
from sicpgen.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def exercise_root(tmp_path: Path) -> Path:
    """Existing, empty root directory for generated exercises."""
    root = tmp_path / "sicp"
    root.mkdir()
    yield root


@pytest.fixture
def missing_root(tmp_path: Path) -> Path:
    """A root path that does not exist."""
    return tmp_path / "does-not-exist"


@pytest.fixture
def make_template_dir(tmp_path: Path):
    """Factory writing ``{name: content}`` templates into a fresh directory."""

    def _make(templates: dict[str, str]) -> Path:
        template_dir = tmp_path / "templates"
        template_dir.mkdir(exist_ok=True)
        for name, content in templates.items():
            (template_dir / name).write_text(content, encoding="utf-8")
        return template_dir

    return _make


# ---------------------------------------------------------------------------
# Renderers & generators
# ---------------------------------------------------------------------------

class RecordingRenderer:
    """Fake renderer that records every call and echoes the context."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        self.calls.append((template_name, dict(context)))
        return f"{template_name}:{sorted(context.items())}"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def renderer(config: Config) -> TemplateRenderer:
    """Renderer over the bundled templates, already validated."""
    template_renderer = TemplateRenderer(config.template_dir)
    template_renderer.load(config.required_templates)
    return template_renderer


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def generator(renderer: TemplateRenderer, config: Config) -> ExerciseGenerator:
    return ExerciseGenerator(renderer, config)
