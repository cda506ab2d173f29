"""create-noiriko configuration.

The resolved answers to every question the scaffolder asks live in a single
frozen Pydantic v2 model, ``ProjectConfig``.  It is built once (from prompts
or from CLI flags merged with the defaults below), validated at construction
time and then handed unchanged to the materializer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


PROJECT_NAME_PATTERN = r"^[a-z0-9-]+$"
DEFAULT_PROJECT_NAME = "my-noiriko-app"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class PackageManager(str, Enum):
    """JavaScript package manager used by the generated monorepo."""
    NPM = "npm"
    PNPM = "pnpm"
    BUN = "bun"
    YARN = "yarn"


class AuthProvider(str, Enum):
    """Authentication provider wired into the web app."""
    NONE = "none"
    BETTER_AUTH = "better-auth"
    CLERK = "clerk"
    NEXT_AUTH = "next-auth"
    LUCIA = "lucia"


class Database(str, Enum):
    """Database backing the web app."""
    NONE = "none"
    SQLITE = "sqlite"
    POSTGRES = "postgres"
    MYSQL = "mysql"
    MONGODB = "mongodb"


class Orm(str, Enum):
    """ORM layered on top of the database."""
    NONE = "none"
    DRIZZLE = "drizzle"
    PRISMA = "prisma"


class UILibrary(str, Enum):
    SHADCN = "shadcn"


class Styling(str, Enum):
    TAILWIND = "tailwind"


class Addon(str, Enum):
    """Optional features layered on top of the base scaffold."""
    API = "api"
    EMAIL = "email"
    PAYMENTS = "payments"
    ANALYTICS = "analytics"
    SEO = "seo"
    I18N = "i18n"


# ---------------------------------------------------------------------------
# Tool pins
# ---------------------------------------------------------------------------

# Value written to the root manifest's ``packageManager`` field.  Yarn stays
# on the classic 1.x line.
PACKAGE_MANAGER_VERSIONS: dict[PackageManager, str] = {
    PackageManager.PNPM: "pnpm@10.4.1",
    PackageManager.NPM: "npm@10.8.2",
    PackageManager.YARN: "yarn@1.22.22",
    PackageManager.BUN: "bun@1.1.38",
}

NODE_ENGINE = ">=20"


# ---------------------------------------------------------------------------
# Configuration record
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Every choice needed to scaffold one project.

    The model is frozen: once the CLI or the prompt layer has produced it,
    nothing downstream may change it.  When ``database`` is ``none`` the
    ``orm`` field is normalised to ``none`` regardless of what was passed in.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(
        ..., min_length=1, pattern=PROJECT_NAME_PATTERN,
        description="Directory and package name of the generated project",
    )
    package_manager: PackageManager = Field(default=PackageManager.PNPM)
    auth: AuthProvider = Field(default=AuthProvider.NONE)
    database: Database = Field(default=Database.NONE)
    orm: Orm = Field(default=Orm.NONE)
    ui: UILibrary = Field(default=UILibrary.SHADCN)
    styling: Styling = Field(default=Styling.TAILWIND)
    git: bool = Field(default=False, description="Initialise a git repository afterwards")
    install: bool = Field(default=False, description="Install dependencies afterwards")
    addons: tuple[Addon, ...] = Field(default=())

    @field_validator("addons", mode="before")
    @classmethod
    def _dedupe_addons(cls, value: Any) -> Any:
        """Collapse duplicate addon tags, keeping first-seen order."""
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        tags = [getattr(tag, "value", tag) for tag in value]
        return tuple(dict.fromkeys(tags))

    @field_validator("orm")
    @classmethod
    def _orm_requires_database(cls, value: Orm, info: ValidationInfo) -> Orm:
        # ``database`` is declared first, so it is already in ``info.data``.
        if info.data.get("database", Database.NONE) is Database.NONE:
            return Orm.NONE
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def package_manager_version(self) -> str:
        """Pinned ``tool@version`` string for the root manifest."""
        return PACKAGE_MANAGER_VERSIONS[self.package_manager]

    @property
    def uses_pnpm_workspace(self) -> bool:
        """pnpm declares workspaces in ``pnpm-workspace.yaml``; the rest use package.json."""
        return self.package_manager is PackageManager.PNPM

    @property
    def workspace_ref(self) -> str:
        """Version specifier for internal packages.

        npm and yarn classic do not understand the ``workspace:`` protocol.
        """
        if self.package_manager in (PackageManager.NPM, PackageManager.YARN):
            return "*"
        return "workspace:*"

    @property
    def run_prefix(self) -> str:
        """Command prefix for running a package script (``npm run`` vs ``pnpm``)."""
        if self.package_manager in (PackageManager.NPM, PackageManager.YARN):
            return f"{self.package_manager.value} run"
        return self.package_manager.value

    def summary(self) -> dict[str, str]:
        """Return the ``{label: value}`` rows shown before creating the project."""
        rows = {
            "Project": self.project_name,
            "Package Manager": self.package_manager.value,
            "Authentication": self.auth.value,
            "Database": self.database.value,
        }
        if self.database is not Database.NONE:
            rows["ORM"] = self.orm.value
        if self.addons:
            rows["Features"] = ", ".join(a.value for a in self.addons)
        rows["Git"] = "Yes" if self.git else "No"
        rows["Install deps"] = "Yes" if self.install else "No"
        return rows


def default_config(project_name: str = DEFAULT_PROJECT_NAME) -> ProjectConfig:
    """The record produced by ``--skip-prompts`` with no other flags."""
    return ProjectConfig(project_name=project_name)
