"""Shared models for script and project generation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass(frozen=True, slots=True)
class FolderEntry:
    """A selectable destination folder below the SuiteScripts root."""

    relative_path: str
    display_label: str
    absolute_path: Path

    @property
    def depth(self) -> int:
        return self.relative_path.count("/")


@dataclass(frozen=True, slots=True)
class TemplateData:
    """Values substituted into script templates."""

    project_name: str
    description: str
    date: str
    company_name: str
    user_name: str
    user_email: str
    script_name: str
    script_id: str
    deployment_id: str
    script_path: str
    record_type: str = ""

    def as_context(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(slots=True)
class GenerationResult:
    """Files written by a single ``add`` invocation."""

    data: TemplateData
    primary_path: Path
    secondary_path: Optional[Path] = None

    @property
    def written(self) -> List[Path]:
        paths = [self.primary_path]
        if self.secondary_path is not None:
            paths.append(self.secondary_path)
        return paths


@dataclass(slots=True)
class ProjectResult:
    """Outcome of ``create``."""

    project_dir: Path
    generated: List[Path] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    account_setup_ran: bool = False


__all__ = ["FolderEntry", "TemplateData", "GenerationResult", "ProjectResult"]
