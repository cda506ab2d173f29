"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and writes a complete Turborepo monorepo (Next.js
web app, shared UI package, eslint and typescript config packages) to disk.
Resolvers only compute ``TemplateFile`` lists; this module is the single
place that touches the filesystem.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..config import AuthProvider, Database, ProjectConfig
from ..errors import TemplateCollisionError
from ..utils import append_file, write_file
from .addon_gen import AddonResolver
from .auth_gen import AuthResolver
from .base_gen import BaseResolver
from .database_gen import DatabaseResolver
from .manifest_gen import ManifestGenerator
from .models import MERGEABLE_PATHS, ProgressEvent, Reporter, Stage, TemplateFile
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Directory skeleton
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: list[str] = [
    "apps/web",
    "apps/web/src/app",
    "apps/web/src/components",
    "apps/web/src/lib",
    "apps/web/public",
    "packages/ui/src",
    "packages/ui/src/components",
    "packages/eslint-config",
    "packages/typescript-config",
]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Materializes a ``ProjectConfig`` into a project directory.

    Steps, in order:
    1. create the project root and the baseline directory skeleton
    2. base scaffold
    3. auth provider files (unless ``auth=none``)
    4. database/ORM files (unless ``database=none``)
    5. addon files, one addon at a time
    6. manifests, workspace config, turbo config, ``.gitignore``, README

    Progress is reported as ``ProgressEvent`` objects to the optional
    *reporter* callback; the generator itself prints nothing.

    Write failures propagate unchanged and nothing is rolled back, so a failed
    run can leave a partially populated directory behind.
    """

    def __init__(
        self,
        config: ProjectConfig,
        reporter: Reporter | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.reporter = reporter
        self.renderer = renderer or TemplateRenderer()
        self.base = BaseResolver(self.renderer)
        self.auth = AuthResolver(self.renderer)
        self.database = DatabaseResolver(self.renderer)
        self.addons = AddonResolver(self.renderer)
        self.manifests = ManifestGenerator(self.renderer)
        self._written: set[str] = set()

    # -- Public API --------------------------------------------------------

    async def generate(self, project_root: str | Path) -> Path:
        """Generate the complete project structure under *project_root*.

        The caller is responsible for checking that *project_root* does not
        already hold a project.

        Returns:
            Path to the generated project root.
        """
        root = Path(project_root)
        self._written = set()
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

        self._emit(Stage.DIRECTORIES, "Creating project structure...")
        await self._create_directory_structure(root)

        self._emit(Stage.BASE, "Writing base template...")
        await self._write_files(root, self.base.resolve(self.config))

        if self.config.auth is not AuthProvider.NONE:
            self._emit(Stage.AUTH, f"Adding {self.config.auth.value} authentication...")
            await self._write_files(root, self.auth.resolve(self.config))

        if self.config.database is not Database.NONE:
            self._emit(Stage.DATABASE, f"Adding {self.config.database.value} database...")
            await self._write_files(root, self.database.resolve(self.config))

        for addon in self.config.addons:
            self._emit(Stage.ADDONS, f"Adding {addon.value}...")
            await self._write_files(root, self.addons.resolve(addon, self.config))

        self._emit(Stage.MANIFESTS, "Writing package manifests...")
        await self._write_files(root, self.manifests.resolve(self.config))

        self._emit(Stage.DONE, "Project created!")
        return root

    @property
    def written_paths(self) -> list[str]:
        """Relative paths written by the last :meth:`generate` call, sorted."""
        return sorted(self._written)

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        for d in BASE_DIRECTORIES:
            await asyncio.to_thread((root / d).mkdir, parents=True, exist_ok=True)

    # -- File writing ------------------------------------------------------

    async def _write_files(self, root: Path, files: list[TemplateFile]) -> None:
        for file in files:
            target = root.joinpath(*file.path.split("/"))
            if file.path in self._written:
                if file.path not in MERGEABLE_PATHS:
                    raise TemplateCollisionError(file.path)
                await asyncio.to_thread(append_file, target, file.content)
            else:
                await asyncio.to_thread(write_file, target, file.content)
                self._written.add(file.path)
            self._emit(Stage.FILE, file.path, path=file.path)

    def _emit(self, stage: Stage, message: str, path: str | None = None) -> None:
        if self.reporter is not None:
            self.reporter(ProgressEvent(stage=stage, message=message, path=path))
