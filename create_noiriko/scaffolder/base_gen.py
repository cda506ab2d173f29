"""Base monorepo scaffold.

Renders everything under ``templates/base/``: the Next.js app shell, the
Tailwind/PostCSS/TypeScript config of ``apps/web``, the shared UI package
(button, card, ``cn`` helper) and the eslint/typescript config packages.
The project name is substituted into the page title and home heading.
"""

from __future__ import annotations

from ..config import ProjectConfig
from .models import TemplateFile
from .templates import TemplateRenderer, build_context


class BaseResolver:
    """Resolves the files every generated project starts with.

    The output does not depend on auth, database or addon choices; other
    resolvers only add paths next to it.
    """

    template_prefix = "base"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def resolve(self, config: ProjectConfig) -> list[TemplateFile]:
        return self.renderer.render_tree(self.template_prefix, build_context(config))
