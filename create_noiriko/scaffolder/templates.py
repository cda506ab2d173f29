"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``create_noiriko/scaffolder/templates/`` directory and renders them with
project-specific context data.  Rendering never touches the output
directory: every method returns strings or ``TemplateFile`` objects and the
materializer decides where and when they are written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..config import ProjectConfig
from .models import TemplateFile


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def build_context(config: ProjectConfig) -> dict[str, Any]:
    """Build the Jinja2 template context from the project config."""
    return {
        "project_name": config.project_name,
        "package_manager": config.package_manager.value,
        "auth": config.auth.value,
        "database": config.database.value,
        "orm": config.orm.value,
        "addons": [a.value for a in config.addons],
        "run_prefix": config.run_prefix,
        "workspace_ref": config.workspace_ref,
    }


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary that
    typically contains the project configuration and a handful of derived
    values (database driver, connection URL, ...).  Undefined variables raise
    instead of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"auth/clerk/middleware.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_file(
        self, template_path: str, output_path: str, context: dict[str, Any]
    ) -> TemplateFile:
        """Render *template_path* and pair the result with *output_path*."""
        return TemplateFile(path=output_path, content=self.render(template_path, context))

    # -- Tree rendering ----------------------------------------------------

    def render_tree(
        self,
        template_prefix: str,
        context: dict[str, Any],
    ) -> list[TemplateFile]:
        """Render every ``*.j2`` file under *template_prefix*.

        The directory structure is preserved: a template at
        ``base/apps/web/next.config.js.j2`` rendered with
        ``template_prefix="base"`` becomes ``apps/web/next.config.js``.

        Args:
            template_prefix: Subdirectory inside the template root to scan.
            context: Template context variables.

        Returns:
            Rendered files, sorted by path.
        """
        prefix_path = self.template_dir / template_prefix
        if not prefix_path.is_dir():
            return []

        files: list[TemplateFile] = []
        for template_file in sorted(prefix_path.rglob("*.j2")):
            rel_str = template_file.relative_to(prefix_path).as_posix()
            output_name = rel_str[: -len(".j2")]
            files.append(
                self.render_file(f"{template_prefix}/{rel_str}", output_name, context)
            )

        return files
