"""Computed metadata files for the generated monorepo.

Unlike the static templates, these files are derived from the configuration:

* root ``package.json`` -- scripts, dev-tool pins, the pinned
  ``packageManager`` and, for npm/yarn/bun, the ``workspaces`` array;
* ``apps/web/package.json`` and ``packages/ui/package.json`` -- dependency
  sets extended by the auth, ORM and addon choices;
* ``pnpm-workspace.yaml`` (pnpm only), ``turbo.json``, ``.gitignore`` and
  ``README.md``.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from ..config import NODE_ENGINE, Addon, AuthProvider, Orm, ProjectConfig
from .models import TemplateFile
from .templates import TemplateRenderer, build_context


WORKSPACE_GLOBS: list[str] = ["apps/*", "packages/*"]
TYPESCRIPT_VERSION = "5.7.3"

AUTH_DEPENDENCIES: dict[AuthProvider, dict[str, str]] = {
    AuthProvider.NONE: {},
    AuthProvider.BETTER_AUTH: {"better-auth": "^1.0.0"},
    AuthProvider.CLERK: {"@clerk/nextjs": "^6.0.0"},
    AuthProvider.NEXT_AUTH: {"next-auth": "^5.0.0"},
    AuthProvider.LUCIA: {"lucia": "^3.2.2"},
}

# ORM -> (dependencies, devDependencies)
ORM_DEPENDENCIES: dict[Orm, tuple[dict[str, str], dict[str, str]]] = {
    Orm.NONE: ({}, {}),
    Orm.DRIZZLE: ({"drizzle-orm": "^0.36.0"}, {"drizzle-kit": "^0.28.0"}),
    Orm.PRISMA: ({"@prisma/client": "^6.0.0"}, {"prisma": "^6.0.0"}),
}

ADDON_DEPENDENCIES: dict[Addon, dict[str, str]] = {
    Addon.PAYMENTS: {"stripe": "^17.4.0"},
    Addon.ANALYTICS: {"@vercel/analytics": "^1.4.1"},
}


def _dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


class ManifestGenerator:
    """Builds the manifests, workspace topology, ignore file and README."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def resolve(self, config: ProjectConfig) -> list[TemplateFile]:
        """Return every computed file for *config*."""
        files = [
            TemplateFile(path="package.json", content=_dump_json(self.root_manifest(config))),
            TemplateFile(path="apps/web/package.json", content=_dump_json(self.web_manifest(config))),
            TemplateFile(path="packages/ui/package.json", content=_dump_json(self.ui_manifest(config))),
            TemplateFile(path="turbo.json", content=_dump_json(self.turbo_config())),
        ]
        if config.uses_pnpm_workspace:
            files.append(TemplateFile(path="pnpm-workspace.yaml", content=self.pnpm_workspace()))

        context = build_context(config)
        files.append(self.renderer.render_file("root/gitignore.j2", ".gitignore", context))
        files.append(self.renderer.render_file("root/README.md.j2", "README.md", context))
        return files

    # -- package.json ------------------------------------------------------

    def root_manifest(self, config: ProjectConfig) -> dict[str, Any]:
        ref = config.workspace_ref
        manifest: dict[str, Any] = {
            "name": config.project_name,
            "version": "0.0.1",
            "private": True,
            "scripts": {
                "build": "turbo build",
                "dev": "turbo dev",
                "lint": "turbo lint",
                "format": 'prettier --write "**/*.{ts,tsx,md}"',
            },
            "devDependencies": {
                "@workspace/eslint-config": ref,
                "@workspace/typescript-config": ref,
                "prettier": "^3.6.2",
                "turbo": "^2.5.5",
                "typescript": TYPESCRIPT_VERSION,
            },
            "packageManager": config.package_manager_version,
            "engines": {"node": NODE_ENGINE},
        }
        if not config.uses_pnpm_workspace:
            manifest["workspaces"] = list(WORKSPACE_GLOBS)
        return manifest

    def web_manifest(self, config: ProjectConfig) -> dict[str, Any]:
        ref = config.workspace_ref
        dependencies: dict[str, str] = {
            "@workspace/ui": ref,
            "next": "^15.1.3",
            "react": "^19.0.0",
            "react-dom": "^19.0.0",
        }
        dev_dependencies: dict[str, str] = {
            "@types/node": "^20.11.19",
            "@types/react": "^19.0.0",
            "@types/react-dom": "^19.0.0",
            "@workspace/eslint-config": ref,
            "@workspace/typescript-config": ref,
            "autoprefixer": "^10.4.20",
            "postcss": "^8.4.49",
            "tailwindcss": "^3.4.17",
            "tailwindcss-animate": "^1.0.7",
            "typescript": TYPESCRIPT_VERSION,
        }

        dependencies.update(AUTH_DEPENDENCIES[config.auth])
        orm_deps, orm_dev_deps = ORM_DEPENDENCIES[config.orm]
        dependencies.update(orm_deps)
        dev_dependencies.update(orm_dev_deps)
        for addon in config.addons:
            dependencies.update(ADDON_DEPENDENCIES.get(addon, {}))

        return {
            "name": "@workspace/web",
            "version": "0.0.1",
            "private": True,
            "scripts": {
                "dev": "next dev",
                "build": "next build",
                "start": "next start",
                "lint": "next lint",
            },
            "dependencies": dependencies,
            "devDependencies": dev_dependencies,
        }

    def ui_manifest(self, config: ProjectConfig) -> dict[str, Any]:
        ref = config.workspace_ref
        return {
            "name": "@workspace/ui",
            "version": "0.0.1",
            "private": True,
            "exports": {
                "./button": "./src/components/button.tsx",
                "./card": "./src/components/card.tsx",
            },
            "scripts": {"lint": "eslint . --max-warnings 0"},
            "dependencies": {
                "class-variance-authority": "^0.7.0",
                "clsx": "^2.1.1",
                "tailwind-merge": "^2.5.5",
            },
            "devDependencies": {
                "@types/react": "^19.0.0",
                "@workspace/eslint-config": ref,
                "@workspace/typescript-config": ref,
                "react": "^19.0.0",
                "typescript": TYPESCRIPT_VERSION,
            },
            "peerDependencies": {"react": "^19.0.0"},
        }

    # -- Workspace / build orchestration -------------------------------------

    @staticmethod
    def pnpm_workspace() -> str:
        return yaml.safe_dump({"packages": list(WORKSPACE_GLOBS)}, sort_keys=False)

    @staticmethod
    def turbo_config() -> dict[str, Any]:
        return {
            "$schema": "https://turbo.build/schema.json",
            "ui": "tui",
            "tasks": {
                "build": {
                    "dependsOn": ["^build"],
                    "inputs": ["$TURBO_DEFAULT$", ".env*"],
                    "outputs": [".next/**", "!.next/cache/**"],
                },
                "lint": {"dependsOn": ["^lint"]},
                "check-types": {"dependsOn": ["^check-types"]},
                "dev": {"cache": False, "persistent": True},
            },
        }
