"""SuiteScript categories supported by ``add``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class ScriptType(str, Enum):
    """Script categories accepted on the command line."""

    BUNDLE = "bundle"
    CLIENT = "client"
    FORMCLIENT = "formclient"
    MAPREDUCE = "mapreduce"
    MASSUPDATE = "massupdate"
    PORTLET = "portlet"
    RESTLET = "restlet"
    SCHEDULED = "scheduled"
    SUITELET = "suitelet"
    USEREVENT = "userevent"
    WORKFLOWACTION = "workflowaction"
    COMMON = "common"


@dataclass(frozen=True, slots=True)
class ScriptTypeDefinition:
    """Metadata and templates for a single script category.

    ``record_type`` is the SDF object type used as the subdirectory for the
    XML definition. Categories without one only produce a TypeScript file.
    """

    description: str
    record_type: Optional[str] = None
    requires_record_type: bool = False

    def primary_template(self, script_type: ScriptType) -> str:
        return f"scripts/{script_type.value}.ts.j2"

    def secondary_template(self, script_type: ScriptType) -> Optional[str]:
        if not self.record_type:
            return None
        return f"objects/{script_type.value}.xml.j2"


_SCRIPT_TYPES: Dict[ScriptType, ScriptTypeDefinition] = {
    ScriptType.BUNDLE: ScriptTypeDefinition(
        description=(
            "Bundle scripts can be of type customization or configuration, "
            "allowing you to group related scripts together"
        ),
    ),
    ScriptType.CLIENT: ScriptTypeDefinition(
        description=(
            "Client scripts are executed by predefined event triggers in the client "
            "browser, enabling you to customize the user interface"
        ),
        record_type="clientscript",
    ),
    ScriptType.FORMCLIENT: ScriptTypeDefinition(
        description=(
            "Form Client scripts are attached to forms, allowing you to add custom "
            "logic and functionality to form submissions"
        ),
    ),
    ScriptType.MAPREDUCE: ScriptTypeDefinition(
        description=(
            "Map/Reduce scripts are designed to handle large amounts of data, making "
            "them ideal for data processing and analysis tasks"
        ),
        record_type="mapreducescript",
    ),
    ScriptType.MASSUPDATE: ScriptTypeDefinition(
        description=(
            "Mass update scripts allow you to programmatically perform custom updates "
            "to fields that are not available through general mass updates"
        ),
        record_type="massupdatescript",
    ),
    ScriptType.PORTLET: ScriptTypeDefinition(
        description=(
            "Portlet scripts are run on the server and are rendered in the NetSuite "
            "dashboard, providing a way to customize the dashboard"
        ),
        record_type="portlet",
    ),
    ScriptType.RESTLET: ScriptTypeDefinition(
        description=(
            "RESTlet is a SuiteScript that you make available for other applications "
            "to call, enabling integration with external services and systems"
        ),
        record_type="restlet",
    ),
    ScriptType.SCHEDULED: ScriptTypeDefinition(
        description=(
            "Scheduled scripts are executed (processed) with SuiteCloud Processors, "
            "allowing you to automate tasks at specific times or intervals"
        ),
        record_type="scheduledscript",
    ),
    ScriptType.SUITELET: ScriptTypeDefinition(
        description=(
            "Suitelets are extensions of the SuiteScript API that allow you to build "
            "custom NetSuite pages and backend logic"
        ),
        record_type="suitelet",
    ),
    ScriptType.USEREVENT: ScriptTypeDefinition(
        description=(
            "User event scripts are executed when users perform actions on records, "
            "such as create, load, update, copy, delete, or submit"
        ),
        record_type="usereventscript",
        requires_record_type=True,
    ),
    ScriptType.WORKFLOWACTION: ScriptTypeDefinition(
        description=(
            "Workflow action scripts are good for custom logic or managing sublist "
            "fields which are not currently available"
        ),
        record_type="workflowactionscript",
        requires_record_type=True,
    ),
    ScriptType.COMMON: ScriptTypeDefinition(
        description=(
            "Holds TypeScript definitions for your scripts, providing a way to define "
            "the structure and types of your code"
        ),
    ),
}

_missing = set(ScriptType) - set(_SCRIPT_TYPES)
if _missing:  # pragma: no cover - guards edits to the table above
    raise RuntimeError(f"Script types without a definition: {sorted(t.value for t in _missing)}")


def available_script_types() -> List[ScriptType]:
    """Return the script categories in display order."""

    return list(_SCRIPT_TYPES.keys())


def get_script_type(script_type: ScriptType | str) -> ScriptTypeDefinition:
    """Return the definition for ``script_type``.

    Raises:
        ValueError: If the name is not a known category.
    """

    return _SCRIPT_TYPES[ScriptType(script_type)]


__all__ = ["ScriptType", "ScriptTypeDefinition", "available_script_types", "get_script_type"]
