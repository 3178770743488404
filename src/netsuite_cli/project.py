"""Project bootstrap on top of the SuiteCloud CLI."""

from __future__ import annotations

import getpass
import os
import shutil
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from loguru import logger

from .config import (
    ConfigParseError,
    ProjectPreferences,
    UserPreferences,
    load_user_preferences,
    save_project_preferences,
    save_user_preferences,
)
from .console import Terminal
from .models import ProjectResult
from .rendering import load_template, render_to_file
from .validators import InputValidationError, validate_name

PROJECT_TYPE = "ACCOUNTCUSTOMIZATION"
SUITECLOUD_COMMANDS: Sequence[str] = ("suitecloud", "suitecloud.cmd")

# (template, output filename) pairs rendered into every new project.
PROJECT_FILES: Sequence[Tuple[str, str]] = (
    ("project/package.json.j2", "package.json"),
    ("project/suitecloud.config.js.j2", "suitecloud.config.js"),
    ("project/tsconfig.json.j2", "tsconfig.json"),
    ("project/gitignore.j2", ".gitignore"),
)

Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]


class ExternalToolError(Exception):
    """Raised when the SuiteCloud CLI is missing or fails."""


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Temporarily change the process working directory."""

    original = Path.cwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(original)


def find_suitecloud_command(which: Callable[[str], Optional[str]] = shutil.which) -> str:
    for candidate in SUITECLOUD_COMMANDS:
        if which(candidate):
            return candidate
    raise ExternalToolError(
        "suitecloud CLI is not available in the command line. "
        "Install it using: npm install -g @oracle/suitecloud-cli"
    )


def default_user_name() -> str:
    """Return the login name without any ``DOMAIN\\`` prefix."""

    try:
        login = getpass.getuser()
    except (KeyError, OSError):
        return ""
    return login.split("\\")[-1]


def _ask_required(terminal: Terminal, label: str, default: str) -> str:
    value = terminal.ask(f"Enter {label.lower()}", default)
    if not value:
        raise InputValidationError(f"{label} cannot be empty.")
    return value


def _collect_identity(terminal: Terminal, stored: Optional[UserPreferences]) -> UserPreferences:
    stored = stored or UserPreferences()
    return UserPreferences(
        company_name=_ask_required(terminal, "Company name", stored.company_name),
        user_name=_ask_required(terminal, "User name", stored.user_name or default_user_name()),
        user_email=_ask_required(terminal, "User email", stored.user_email),
    )


def _load_stored_identity(terminal: Terminal, home: Path | None) -> Optional[UserPreferences]:
    try:
        return load_user_preferences(home)
    except (ConfigParseError, OSError) as exc:
        terminal.warning(f"Failed to load user configuration: {exc}")
        return None


def _make_project_folders(project_dir: Path, project_name: str, result: ProjectResult, terminal: Terminal) -> None:
    for folder in (
        project_dir / "src" / "FileCabinet" / "SuiteScripts" / project_name,
        project_dir / "src" / "Objects" / project_name,
    ):
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            message = f"Failed to create project folder {folder}: {exc}"
            result.warnings.append(message)
            terminal.warning(message)
        else:
            terminal.info(f"Created project folder: {folder}")


def _run_account_setup(command: str, project_dir: Path, runner: Runner, result: ProjectResult, terminal: Terminal) -> None:
    terminal.info("Setting up account...")
    try:
        completed = runner([command, "account:setup"], cwd=project_dir, check=False)
        failure = f"exit status {completed.returncode}" if completed.returncode != 0 else ""
    except OSError as exc:
        failure = str(exc)

    if failure:
        message = f"Account setup encountered an error: {failure}"
        result.warnings.append(message)
        terminal.warning(message)
        terminal.info("You can run 'suitecloud account:setup' manually in the project directory.")
        return
    result.account_setup_ran = True
    terminal.success("Account setup completed successfully.")


def _save_preferences(
    project_dir: Path,
    preferences: ProjectPreferences,
    home: Path | None,
    result: ProjectResult,
    terminal: Terminal,
) -> None:
    try:
        save_project_preferences(preferences, project_dir)
    except OSError as exc:
        result.warnings.append(f"Failed to save configuration: {exc}")
        terminal.warning(f"Failed to save configuration: {exc}")
    else:
        terminal.info("Configuration saved to project")

    try:
        save_user_preferences(preferences.to_user_preferences(), home)
    except OSError as exc:
        result.warnings.append(f"Failed to save user configuration: {exc}")
        terminal.warning(f"Failed to save user configuration: {exc}")
    else:
        terminal.info("User configuration saved to home directory")


def create_project(
    project_name: Optional[str] = None,
    *,
    terminal: Terminal,
    output_dir: Path = Path("."),
    skip_setup: bool = False,
    home: Path | None = None,
    runner: Runner = subprocess.run,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> ProjectResult:
    """Create a SuiteCloud project and record its preferences.

    ``suitecloud project:create`` runs from inside ``output_dir`` and inherits
    the terminal so it can prompt on its own. A failing account setup only
    produces a warning because the project already exists at that point.
    """

    command = find_suitecloud_command(which)
    stored = _load_stored_identity(terminal, home)

    name = (project_name or "").strip()
    if not name:
        name = terminal.ask("Enter project name")
    if not name:
        raise InputValidationError(
            "Project name cannot be empty. Use --name or -n to specify it, or provide it interactively."
        )
    name = validate_name(name, "Project name")
    identity = _collect_identity(terminal, stored)

    output_dir = output_dir if output_dir.is_absolute() else Path.cwd() / output_dir
    project_dir = output_dir / name
    if project_dir.exists():
        raise InputValidationError(f"Project directory '{project_dir}' already exists.")

    terminal.info(f"Creating project '{name}' (type: {PROJECT_TYPE})...")
    create_args: List[str] = [command, "project:create", "--type", PROJECT_TYPE, "--projectname", name]
    logger.debug("Running {} in {}", create_args, output_dir)
    with working_directory(output_dir):
        try:
            completed = runner(create_args, check=False)
        except OSError as exc:
            raise ExternalToolError(f"Error creating project: {exc}") from exc
    if completed.returncode != 0:
        raise ExternalToolError(f"Error creating project: suitecloud exited with status {completed.returncode}")
    if not project_dir.is_dir():
        raise ExternalToolError(f"Project directory '{project_dir}' was not created.")

    result = ProjectResult(project_dir=project_dir)
    _make_project_folders(project_dir, name, result, terminal)

    terminal.info("Generating configuration files...")
    context = {"project_name": name}
    for template_name, filename in PROJECT_FILES:
        result.generated.append(render_to_file(project_dir / filename, load_template(template_name), context))

    if skip_setup:
        terminal.info("Skipping account setup (--skip-setup flag used).")
    else:
        _run_account_setup(command, project_dir, runner, result, terminal)

    preferences = ProjectPreferences(
        project_name=name,
        company_name=identity.company_name,
        user_name=identity.user_name,
        user_email=identity.user_email,
    )
    _save_preferences(project_dir, preferences, home, result, terminal)
    return result


__all__ = [
    "ExternalToolError",
    "PROJECT_TYPE",
    "create_project",
    "find_suitecloud_command",
    "working_directory",
]
