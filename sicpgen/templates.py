"""Jinja2 template rendering for exercise scaffolding.

Provides the TemplateRenderer class which loads ``.tpl`` templates from the
``sicpgen/templates/`` directory (or a configured replacement) and renders
them with exercise-specific context data.  Templates are parsed up front by
``load`` so that a broken template stops the program before any command
touches the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from .config import DEFAULT_TEMPLATE_DIR
from .errors import TemplateLoadError, TemplateRenderError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".tpl"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for exercise scaffolding.

    Undefined variables are errors rather than empty strings, so a template
    that references something missing from its context fails loudly.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    # -- Startup validation ------------------------------------------------

    def load(self, required: Iterable[str] = ()) -> list[str]:
        """Parse every template and check that *required* ones exist.

        Returns:
            Sorted names of the templates that were loaded.

        Raises:
            TemplateLoadError: If the directory is missing, a template cannot
                be read or parsed, or a required template is absent.
        """
        if not self.template_dir.is_dir():
            raise TemplateLoadError(self.template_dir, "template directory not found")

        names = self.list_templates()
        for name in names:
            try:
                self.env.get_template(name)
            except (TemplateError, OSError, UnicodeDecodeError) as exc:
                raise TemplateLoadError(self.template_dir, f"{name}: {exc}") from exc

        missing = sorted(set(required) - set(names))
        if missing:
            raise TemplateLoadError(
                self.template_dir, f"missing template(s): {', '.join(missing)}"
            )

        logger.debug("Loaded %d template(s) from %s", len(names), self.template_dir)
        return names

    # -- Rendering -----------------------------------------------------------

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_name: Path relative to the template directory (e.g.
                ``"readme.md.tpl"``).
            context: Dictionary of variables available inside the template.

        Raises:
            TemplateRenderError: If the template is missing, cannot be read,
                references a variable that *context* does not define, or
                fails while rendering.
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except Exception as exc:  # noqa: BLE001
            raise TemplateRenderError(template_name, exc) from exc

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.tpl`` template paths.

        Paths are relative to the template root directory.
        """
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in self.template_dir.rglob(f"*{TEMPLATE_SUFFIX}")
        )
