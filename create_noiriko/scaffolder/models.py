"""Pydantic models shared by the resolvers and the materializer."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class TemplateFile(BaseModel):
    """A file to write, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Forward-slash path relative to the project root")
    content: str = Field(default="")


class Stage(str, Enum):
    """Steps reported by the materializer, in the order they run."""
    DIRECTORIES = "directories"
    BASE = "base"
    AUTH = "auth"
    DATABASE = "database"
    ADDONS = "addons"
    MANIFESTS = "manifests"
    FILE = "file"
    DONE = "done"


class ProgressEvent(BaseModel):
    """Structured progress notification emitted while a project is written."""

    model_config = ConfigDict(frozen=True)

    stage: Stage
    message: str = ""
    path: Optional[str] = None


Reporter = Callable[[ProgressEvent], None]


# ---------------------------------------------------------------------------
# Shared paths
# ---------------------------------------------------------------------------

ENV_EXAMPLE_PATH = "apps/web/.env.example"

# Paths several resolvers may contribute to in one run; later content is
# appended instead of replacing what is already there.
MERGEABLE_PATHS: frozenset[str] = frozenset({ENV_EXAMPLE_PATH})
