"""Template rendering for scripts, SDF objects and project files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound
from loguru import logger

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class TemplateRenderError(Exception):
    """Raised when a template cannot be parsed or rendered."""


def _environment(template_dir: Path = TEMPLATES_DIR) -> Environment:
    loader = FileSystemLoader(str(template_dir))
    return Environment(loader=loader, autoescape=False, keep_trailing_newline=True)


def load_template(name: str, template_dir: Path = TEMPLATES_DIR) -> str:
    """Return the raw body of a packaged template."""

    env = _environment(template_dir)
    try:
        source, _, _ = env.loader.get_source(env, name)  # type: ignore[union-attr]
    except TemplateNotFound as exc:
        raise TemplateRenderError(f"Template not found: {name}") from exc
    return source


def render(template_body: str, data: Mapping[str, Any]) -> str:
    """Substitute ``data`` into ``template_body``.

    Undefined names render as empty strings.
    """

    try:
        template = _environment().from_string(template_body)
        return template.render(**data)
    except (TemplateError, TypeError, ValueError, AttributeError) as exc:
        raise TemplateRenderError(f"Failed to render template: {exc}") from exc


def render_to_file(path: Path, template_body: str, data: Mapping[str, Any]) -> Path:
    """Render a template and write the result to ``path``."""

    content = render(template_body, data)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote {} ({} bytes)", path, len(content))
    return path


__all__ = ["TEMPLATES_DIR", "TemplateRenderError", "load_template", "render", "render_to_file"]
