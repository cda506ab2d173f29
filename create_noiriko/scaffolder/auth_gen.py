"""Authentication provider integration files.

Each provider maps to a fixed bundle of one to three files carrying the
provider's usual Next.js integration snippet.  Auth templates are rendered
with an empty context: they are the same for every project.
"""

from __future__ import annotations

from ..config import AuthProvider, ProjectConfig
from .models import ENV_EXAMPLE_PATH, TemplateFile
from .templates import TemplateRenderer


# Provider -> ((template, output path), ...)
AUTH_BUNDLES: dict[AuthProvider, tuple[tuple[str, str], ...]] = {
    AuthProvider.NONE: (),
    AuthProvider.BETTER_AUTH: (
        ("auth/better-auth/auth.ts.j2", "apps/web/src/lib/auth.ts"),
        ("auth/better-auth/route.ts.j2", "apps/web/src/app/api/auth/[...all]/route.ts"),
    ),
    AuthProvider.CLERK: (
        ("auth/clerk/middleware.ts.j2", "apps/web/src/middleware.ts"),
        ("auth/clerk/env.example.j2", ENV_EXAMPLE_PATH),
    ),
    AuthProvider.NEXT_AUTH: (
        ("auth/next-auth/auth.ts.j2", "apps/web/src/lib/auth.ts"),
        ("auth/next-auth/route.ts.j2", "apps/web/src/app/api/auth/[...nextauth]/route.ts"),
        ("auth/next-auth/env.example.j2", ENV_EXAMPLE_PATH),
    ),
    AuthProvider.LUCIA: (
        ("auth/lucia/auth.ts.j2", "apps/web/src/lib/auth.ts"),
    ),
}


class AuthResolver:
    """Resolves the files for the configured authentication provider."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def resolve(self, config: ProjectConfig) -> list[TemplateFile]:
        """Return the provider bundle, or an empty list for ``auth=none``."""
        return [
            self.renderer.render_file(template, output, {})
            for template, output in AUTH_BUNDLES[config.auth]
        ]
