"""Generation of SuiteScript source and SDF object files."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import ProjectPreferences, load_project_preferences
from .console import Terminal
from .folders import enumerate_folders, find_objects_dir, find_suitescripts_dir
from .models import GenerationResult, TemplateData
from .naming import deployment_id_for, prefixed_file_name, script_id_for, to_snake_case
from .rendering import load_template, render_to_file
from .script_types import ScriptType, get_script_type
from .selector import SelectionKind, UserCancelled, select_folder
from .validators import InputValidationError, require_value, validate_name

SCRIPT_PATH_PREFIX = "SuiteScripts"


def _resolve_script_name(
    script_name: Optional[str], preferences: ProjectPreferences, terminal: Terminal
) -> str:
    name = (script_name or "").strip()
    if not name:
        name = terminal.ask("Enter script name", to_snake_case(preferences.project_name))
    if not name:
        raise InputValidationError("Script name is required")
    return validate_name(name, "Script name")


def _resolve_record_type(script_type: ScriptType, terminal: Terminal) -> str:
    value = terminal.ask("Enter record type (e.g., CUSTOMER, SALESORDER, INVOICE)")
    try:
        return require_value(value, "Record type")
    except InputValidationError as exc:
        raise InputValidationError(f"Record type is required for {script_type.value} scripts") from exc


def _select_subfolder(suitescripts_dir: Path, terminal: Terminal) -> str:
    entries = enumerate_folders(suitescripts_dir)
    logger.debug("Found {} folders under {}", len(entries), suitescripts_dir)
    selection = select_folder(entries, terminal)
    if selection.kind is SelectionKind.CANCELLED:
        raise UserCancelled("Cancelled. Script not created.")
    if selection.kind is SelectionKind.ENTRY and selection.index is not None:
        return entries[selection.index].relative_path
    return ""


def generate_script(
    script_type: ScriptType | str,
    script_name: Optional[str] = None,
    *,
    terminal: Terminal,
    base_dir: Path | None = None,
    today: date | None = None,
) -> GenerationResult:
    """Create a script (and its object definition where applicable).

    Prompts for anything not supplied, asks where under SuiteScripts the file
    should live, then writes ``<prefix>_<name>_<type>.ts`` and, for types
    with an SDF record type, ``Objects/<project>/<recordtype>/<prefix>_<name>.xml``.

    Files already written are left in place if a later step fails.
    """

    script_type = ScriptType(script_type)
    definition = get_script_type(script_type)
    base_dir = base_dir or Path.cwd()

    preferences = load_project_preferences(base_dir)
    logger.debug("Adding {} script to project {}", script_type.value, preferences.project_name)

    name = _resolve_script_name(script_name, preferences, terminal)
    description = terminal.ask("Enter script description", f"{name} description")
    record_type = _resolve_record_type(script_type, terminal) if definition.requires_record_type else ""

    file_stem = prefixed_file_name(preferences.company_name, name)
    primary_name = f"{file_stem}_{script_type.value}.ts"

    suitescripts_dir = find_suitescripts_dir(base_dir)
    subfolder = _select_subfolder(suitescripts_dir, terminal)
    target_dir = suitescripts_dir.joinpath(*subfolder.split("/")) if subfolder else suitescripts_dir
    target_dir.mkdir(parents=True, exist_ok=True)

    data = TemplateData(
        project_name=preferences.project_name,
        description=description,
        date=(today or date.today()).isoformat(),
        company_name=preferences.company_name,
        user_name=preferences.user_name,
        user_email=preferences.user_email,
        script_name=name,
        script_id=script_id_for(name),
        deployment_id=deployment_id_for(name),
        script_path="/".join(part for part in (SCRIPT_PATH_PREFIX, subfolder, primary_name) if part),
        record_type=record_type,
    )
    context = data.as_context()

    primary_path = render_to_file(
        target_dir / primary_name, load_template(definition.primary_template(script_type)), context
    )
    terminal.success(f"Created {primary_path}")
    result = GenerationResult(data=data, primary_path=primary_path)

    secondary_template = definition.secondary_template(script_type)
    if secondary_template and definition.record_type:
        xml_dir = find_objects_dir(base_dir) / preferences.project_name / definition.record_type
        xml_dir.mkdir(parents=True, exist_ok=True)
        result.secondary_path = render_to_file(
            xml_dir / f"{file_stem}.xml", load_template(secondary_template), context
        )
        terminal.success(f"Created {result.secondary_path}")
    else:
        terminal.detail(f"No object definition for {script_type.value} scripts")

    return result


__all__ = ["SCRIPT_PATH_PREFIX", "generate_script"]
