"""Optional feature addons.

Each addon contributes a small, self-contained set of files.  Tags outside
the ``Addon`` enum resolve to nothing so that configs written by newer
versions of the tool still scaffold.
"""

from __future__ import annotations

from ..config import Addon, ProjectConfig
from .models import ENV_EXAMPLE_PATH, TemplateFile
from .templates import TemplateRenderer, build_context


# Addon -> ((template, output path), ...)
ADDON_FILES: dict[Addon, tuple[tuple[str, str], ...]] = {
    Addon.API: (
        ("addons/api/route.ts.j2", "apps/web/src/app/api/hello/route.ts"),
    ),
    Addon.EMAIL: (
        ("addons/email/package.json.j2", "packages/email/package.json"),
        ("addons/email/tsconfig.json.j2", "packages/email/tsconfig.json"),
        ("addons/email/index.ts.j2", "packages/email/src/index.ts"),
        ("addons/email/env.example.j2", ENV_EXAMPLE_PATH),
    ),
    Addon.PAYMENTS: (
        ("addons/payments/stripe.ts.j2", "apps/web/src/lib/payments/stripe.ts"),
        ("addons/payments/env.example.j2", ENV_EXAMPLE_PATH),
    ),
    Addon.ANALYTICS: (
        ("addons/analytics/analytics.tsx.j2", "apps/web/src/components/analytics.tsx"),
    ),
    Addon.SEO: (
        ("addons/seo/sitemap.ts.j2", "apps/web/src/app/sitemap.ts"),
        ("addons/seo/robots.ts.j2", "apps/web/src/app/robots.ts"),
    ),
    Addon.I18N: (
        ("addons/i18n/config.ts.j2", "apps/web/src/i18n/config.ts"),
        ("addons/i18n/en.json.j2", "apps/web/src/i18n/dictionaries/en.json"),
    ),
}


class AddonResolver:
    """Resolves the files contributed by individual addons."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def resolve(self, tag: Addon | str, config: ProjectConfig) -> list[TemplateFile]:
        """Return the files for *tag*; unknown tags yield an empty list."""
        try:
            addon = Addon(tag)
        except ValueError:
            return []

        context = build_context(config)
        return [
            self.renderer.render_file(template, output, context)
            for template, output in ADDON_FILES[addon]
        ]

    def resolve_all(self, config: ProjectConfig) -> list[TemplateFile]:
        """Concatenate the output of every addon selected in *config*."""
        files: list[TemplateFile] = []
        for addon in config.addons:
            files.extend(self.resolve(addon, config))
        return files
