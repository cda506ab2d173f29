"""create-noiriko scaffolder -- turns a ``ProjectConfig`` into a monorepo.

Resolvers compute ``TemplateFile`` lists from the configuration without
touching the disk; ``ProjectGenerator`` writes them out.

Quick usage::

    from create_noiriko.config import ProjectConfig
    from create_noiriko.scaffolder import ProjectGenerator

    config = ProjectConfig(project_name="my-app", auth="clerk")
    generator = ProjectGenerator(config)
    project_path = await generator.generate("/tmp/my-app")
"""

from .generator import ProjectGenerator
from .models import ProgressEvent, Stage, TemplateFile
from .templates import TemplateRenderer

__all__ = [
    "ProgressEvent",
    "ProjectGenerator",
    "Stage",
    "TemplateFile",
    "TemplateRenderer",
]
