"""create-noiriko command line entry point.

Usage::

    create-noiriko my-app
    create-noiriko my-app --auth clerk --database postgres --orm drizzle
    create-noiriko my-app --skip-prompts --package-manager bun --git

Exit codes: 0 on success or when the user cancels a prompt, 1 when the
project name is invalid, the target directory already exists, writing the
project fails or dependency installation fails.  An unknown option value
(e.g. ``--auth auth0``) is an argparse usage error and exits with 2, also
under ``--skip-prompts``.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path
from typing import Optional

from rich.progress import Progress, TaskID

from . import __version__
from .config import (
    DEFAULT_PROJECT_NAME,
    AuthProvider,
    Database,
    Orm,
    PackageManager,
    ProjectConfig,
    UILibrary,
)
from .environment import initialize_git, install_dependencies
from .errors import InstallError, PromptCancelled
from .prompts import ConfigPrompter
from .scaffolder import ProgressEvent, ProjectGenerator, Stage
from .utils import (
    console,
    create_progress,
    format_duration,
    print_banner,
    print_error,
    print_success,
    print_warning,
    validate_project_name,
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _values(enum_cls: type) -> list[str]:
    return [member.value for member in enum_cls]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-noiriko",
        description="Create a new noiriko monorepo project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-noiriko my-app\n"
            "  create-noiriko my-app --auth clerk --database postgres --orm drizzle\n"
            "  create-noiriko my-app --skip-prompts --package-manager bun --git\n"
        ),
    )
    parser.add_argument("project_name", nargs="?", default=None, help="Name of the project")
    parser.add_argument(
        "--package-manager", choices=_values(PackageManager), default=None,
        help="Package manager to use",
    )
    parser.add_argument(
        "--auth", choices=_values(AuthProvider), default=None,
        help="Authentication provider",
    )
    parser.add_argument(
        "--database", choices=_values(Database), default=None,
        help="Database to use",
    )
    parser.add_argument("--orm", choices=_values(Orm), default=None, help="ORM to use")
    parser.add_argument("--ui", choices=_values(UILibrary), default=None, help="UI library")
    parser.add_argument("--git", action="store_true", help="Initialize git repository")
    parser.add_argument("--install", action="store_true", help="Install dependencies automatically")
    parser.add_argument(
        "--skip-prompts", action="store_true",
        help="Skip interactive prompts and use flags or defaults",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_flags(project_name: str, args: argparse.Namespace) -> ProjectConfig:
    """Build the record for ``--skip-prompts``: flag values, else defaults."""
    return ProjectConfig(
        project_name=project_name,
        package_manager=args.package_manager or PackageManager.PNPM,
        auth=args.auth or AuthProvider.NONE,
        database=args.database or Database.NONE,
        orm=args.orm or Orm.NONE,
        ui=args.ui or UILibrary.SHADCN,
        git=args.git,
        install=args.install,
    )


# ---------------------------------------------------------------------------
# Progress rendering
# ---------------------------------------------------------------------------


class ProgressRenderer:
    """Feeds ``ProgressEvent`` objects from the generator into a Rich spinner."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        self.progress = progress
        self.task_id = task_id
        self.files_written = 0

    def __call__(self, event: ProgressEvent) -> None:
        if event.stage is Stage.FILE:
            self.files_written += 1
            return
        self.progress.update(self.task_id, description=event.message)


async def create(config: ProjectConfig, project_path: Path) -> None:
    """Write the project, then run the optional git and install steps."""
    start = time.monotonic()
    with create_progress() as progress:
        task_id = progress.add_task("Creating project structure...", total=None)
        renderer = ProgressRenderer(progress, task_id)
        await ProjectGenerator(config, reporter=renderer).generate(project_path)
    print_success(
        f"Project created! ({renderer.files_written} files in "
        f"{format_duration(time.monotonic() - start)})"
    )

    if config.git:
        with console.status("Initializing git repository..."):
            initialized = await initialize_git(project_path)
        if initialized:
            print_success("Git repository initialized!")

    if config.install:
        console.print(f"Installing dependencies with {config.package_manager.value}...")
        await install_dependencies(config.package_manager, project_path)
        print_success("Dependencies installed!")


def print_next_steps(config: ProjectConfig) -> None:
    console.print("\n[bold]Next steps:[/bold]")
    console.print(f"[cyan]  cd {config.project_name}[/cyan]")
    if not config.install:
        console.print(f"[cyan]  {config.package_manager.value} install[/cyan]")
    console.print(f"[cyan]  {config.run_prefix} dev[/cyan]")
    console.print("\n[dim]Start building your application[/dim]")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``create-noiriko`` / ``python -m create_noiriko``."""
    args = build_parser().parse_args(argv)
    prompter = ConfigPrompter()

    print_banner("create-noiriko")

    try:
        project_name = args.project_name
        if project_name is None:
            project_name = DEFAULT_PROJECT_NAME if args.skip_prompts else prompter.ask_project_name()

        problem = validate_project_name(project_name)
        if problem:
            print_error(f"Error: {problem}")
            return 1

        project_path = Path.cwd() / project_name
        if project_path.exists():
            print_error(f"Directory {project_name} already exists")
            return 1

        if args.skip_prompts:
            config = config_from_flags(project_name, args)
        else:
            config = prompter.collect(project_name, args)
            prompter.confirm_summary(config)
    except PromptCancelled as exc:
        print_warning(str(exc))
        return 0

    try:
        asyncio.run(create(config, project_path))
    except InstallError as exc:
        print_error(f"Error: {exc}")
        return 1
    except Exception as exc:
        print_error(f"Failed to create project: {exc}")
        return 1

    print_success("✓ Project created successfully!")
    print_next_steps(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
