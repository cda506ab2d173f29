"""Post-scaffold side effects: git initialization and dependency install.

Both steps shell out to external tools and block until the tool exits; no
timeout is applied.  They differ in how failure is treated:

* git initialization failing (git missing, no ``user.email`` configured, ...)
  is downgraded to a warning and the run continues;
* dependency installation failing raises ``InstallError``.
"""

from __future__ import annotations

from pathlib import Path

from .config import PackageManager
from .errors import InstallError
from .utils import print_warning, run_command


GIT_STEPS: list[list[str]] = [
    ["git", "init"],
    ["git", "add", "."],
    ["git", "commit", "-m", "Initial commit from create-noiriko"],
]

# Yarn classic installs when run without a subcommand.
INSTALL_COMMANDS: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["npm", "install"],
    PackageManager.PNPM: ["pnpm", "install"],
    PackageManager.BUN: ["bun", "install"],
    PackageManager.YARN: ["yarn"],
}


def install_command(package_manager: PackageManager | str) -> list[str]:
    """Return the install invocation for *package_manager* (pnpm if unknown)."""
    try:
        pm = PackageManager(package_manager)
    except ValueError:
        pm = PackageManager.PNPM
    return list(INSTALL_COMMANDS[pm])


async def initialize_git(project_path: str | Path) -> bool:
    """Run ``git init``, ``git add .`` and an initial commit in *project_path*.

    Returns:
        ``True`` if all three commands succeeded, ``False`` otherwise.  A
        failure is reported as a warning and never raised.
    """
    for cmd in GIT_STEPS:
        try:
            returncode, _stdout, stderr = await run_command(cmd, cwd=project_path)
        except OSError as exc:
            print_warning(f"Failed to initialize git repository: {exc}")
            return False
        if returncode != 0:
            detail = stderr or f"`{' '.join(cmd)}` exited with {returncode}"
            print_warning(f"Failed to initialize git repository: {detail}")
            return False
    return True


async def install_dependencies(
    package_manager: PackageManager | str, project_path: str | Path
) -> None:
    """Install the project's dependencies, streaming the tool's output.

    Raises:
        InstallError: If the package manager cannot be started or exits
            with a non-zero code.
    """
    cmd = install_command(package_manager)
    cmd_str = " ".join(cmd)
    try:
        returncode, _, _ = await run_command(cmd, cwd=project_path, capture=False)
    except OSError as exc:
        raise InstallError(f"Could not run {cmd_str}: {exc}", command=cmd_str) from exc

    if returncode != 0:
        raise InstallError(
            f"Dependency installation failed (exit {returncode}): {cmd_str}",
            command=cmd_str,
            returncode=returncode,
        )
