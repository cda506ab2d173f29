"""Interactive questions asked before a project is created.

Built on ``rich.prompt``.  Selections are shown as numbered lists and answered
by number.  Ctrl-C or end-of-input on any question raises ``PromptCancelled``
so the CLI can stop before anything is written.
"""

from __future__ import annotations

from argparse import Namespace
from typing import Any, Callable, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .config import (
    Addon,
    AuthProvider,
    Database,
    Orm,
    PackageManager,
    ProjectConfig,
)
from .errors import PromptCancelled
from .utils import console as default_console
from .utils import print_summary_table, validate_project_name


# (value, label, hint)
Choice = tuple[str, str, str]

PACKAGE_MANAGER_CHOICES: list[Choice] = [
    (PackageManager.PNPM.value, "pnpm (recommended)", "Fast, disk space efficient"),
    (PackageManager.NPM.value, "npm", "Node default"),
    (PackageManager.BUN.value, "bun", "Blazingly fast"),
    (PackageManager.YARN.value, "yarn", "Classic choice"),
]

AUTH_CHOICES: list[Choice] = [
    (AuthProvider.NONE.value, "None", "Set up authentication later"),
    (AuthProvider.BETTER_AUTH.value, "Better Auth", "Modern, type-safe auth"),
    (AuthProvider.CLERK.value, "Clerk", "Complete auth solution"),
    (AuthProvider.NEXT_AUTH.value, "NextAuth.js", "Popular choice for Next.js"),
    (AuthProvider.LUCIA.value, "Lucia", "Lightweight auth library"),
]

DATABASE_CHOICES: list[Choice] = [
    (Database.NONE.value, "None", "No database setup"),
    (Database.SQLITE.value, "SQLite", "Local file-based database"),
    (Database.POSTGRES.value, "PostgreSQL", "Production-ready SQL"),
    (Database.MYSQL.value, "MySQL", "Popular SQL database"),
    (Database.MONGODB.value, "MongoDB", "NoSQL document database"),
]

ORM_CHOICES: list[Choice] = [
    (Orm.DRIZZLE.value, "Drizzle ORM", "TypeScript-first ORM"),
    (Orm.PRISMA.value, "Prisma", "Next-generation ORM"),
    (Orm.NONE.value, "None", "Use raw SQL"),
]

ADDON_CHOICES: list[Choice] = [
    (Addon.API.value, "API Routes", "Example REST route handler"),
    (Addon.EMAIL.value, "Email", "Resend email package"),
    (Addon.PAYMENTS.value, "Payments", "Stripe integration"),
    (Addon.ANALYTICS.value, "Analytics", "Vercel Analytics"),
    (Addon.SEO.value, "SEO", "Sitemap and robots.txt"),
    (Addon.I18N.value, "Internationalization", "Multi-language support"),
]


class ConfigPrompter:
    """Asks the configuration questions and assembles a ``ProjectConfig``."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or default_console

    # -- Primitive questions -------------------------------------------------

    def _ask(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, console=self.console, **kwargs)
        except (KeyboardInterrupt, EOFError):
            raise PromptCancelled() from None

    def text(
        self,
        message: str,
        default: Optional[str] = None,
        validator: Optional[Callable[[str], Optional[str]]] = None,
    ) -> str:
        """Ask for free text, re-asking while *validator* returns an error."""
        while True:
            answer = self._ask(Prompt.ask, message, default=default)
            answer = (answer or "").strip()
            problem = validator(answer) if validator else None
            if problem is None:
                return answer
            self.console.print(f"[red]{problem}[/red]")

    def select(self, message: str, choices: list[Choice]) -> str:
        """Ask the user to pick exactly one of *choices*; returns its value."""
        self._print_choices(message, choices)
        answer = self._ask(
            Prompt.ask,
            "Select",
            choices=[str(i) for i in range(1, len(choices) + 1)],
            default="1",
            show_choices=False,
        )
        return choices[int(answer) - 1][0]

    def multiselect(self, message: str, choices: list[Choice]) -> list[str]:
        """Ask for any subset of *choices* as comma-separated numbers."""
        self._print_choices(message, choices)
        while True:
            answer = self._ask(
                Prompt.ask,
                "Select (comma-separated numbers, blank for none)",
                default="",
                show_default=False,
            )
            picked = _parse_selection(answer or "", len(choices))
            if picked is not None:
                return [choices[i][0] for i in picked]
            self.console.print(f"[red]Enter numbers between 1 and {len(choices)}.[/red]")

    def confirm(self, message: str, default: bool = True) -> bool:
        return bool(self._ask(Confirm.ask, message, default=default))

    def _print_choices(self, message: str, choices: list[Choice]) -> None:
        self.console.print(f"\n[bold blue]{message}[/bold blue]")
        table = Table(show_header=False, box=None)
        for i, (_value, label, hint) in enumerate(choices, 1):
            table.add_row(f"[cyan]{i})[/cyan]", label, f"[dim]{hint}[/dim]")
        self.console.print(table)

    # -- Configuration flow --------------------------------------------------

    def ask_project_name(self) -> str:
        return self.text(
            "What is your project named?",
            default="my-noiriko-app",
            validator=validate_project_name,
        )

    def collect(self, project_name: str, options: Namespace) -> ProjectConfig:
        """Ask every question not already answered by a CLI flag."""
        package_manager = options.package_manager or self.select(
            "Which package manager would you like to use?", PACKAGE_MANAGER_CHOICES
        )
        auth = options.auth or self.select(
            "Which authentication provider would you like to use?", AUTH_CHOICES
        )
        database = options.database or self.select(
            "Which database would you like to use?", DATABASE_CHOICES
        )

        orm = options.orm or Orm.NONE.value
        if database != Database.NONE.value and not options.orm:
            orm = self.select("Which ORM would you like to use?", ORM_CHOICES)

        addons = self.multiselect("Select additional features", ADDON_CHOICES)

        git = options.git or self.confirm("Initialize a git repository?", default=True)
        install = options.install or self.confirm("Install dependencies?", default=True)

        return ProjectConfig(
            project_name=project_name,
            package_manager=package_manager,
            auth=auth,
            database=database,
            orm=orm,
            ui=options.ui or "shadcn",
            git=git,
            install=install,
            addons=addons,
        )

    def confirm_summary(self, config: ProjectConfig) -> None:
        """Show the configuration and ask for a final go-ahead."""
        self.console.print()
        print_summary_table(config.summary())
        if not self.confirm("Ready to create your project?", default=True):
            raise PromptCancelled("Project creation cancelled")


def _parse_selection(answer: str, count: int) -> Optional[list[int]]:
    """Turn ``"1, 3"`` into ``[0, 2]``; ``None`` if any entry is invalid."""
    picked: list[int] = []
    for part in answer.replace(" ", "").split(","):
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= count:
            return None
        index = int(part) - 1
        if index not in picked:
            picked.append(index)
    return picked
