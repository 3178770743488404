"""Preference records stored alongside projects and in the user's home."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

CONFIG_FILENAME = ".netsuite-cli"


class UserPreferences(BaseModel):
    """Identity remembered between projects."""

    model_config = ConfigDict(populate_by_name=True)

    company_name: str = Field(default="", alias="companyName")
    user_name: str = Field(default="", alias="userName")
    user_email: str = Field(default="", alias="userEmail")


class ProjectPreferences(BaseModel):
    """Metadata written into the root of every created project."""

    model_config = ConfigDict(populate_by_name=True)

    project_name: str = Field(default="", alias="projectName")
    company_name: str = Field(default="", alias="companyName")
    user_name: str = Field(default="", alias="userName")
    user_email: str = Field(default="", alias="userEmail")

    def to_user_preferences(self) -> UserPreferences:
        return UserPreferences(
            company_name=self.company_name,
            user_name=self.user_name,
            user_email=self.user_email,
        )


class ConfigError(Exception):
    """Raised when a preference file cannot be used."""


class ConfigNotFoundError(ConfigError):
    """Raised when the current directory is not a project folder."""


class ConfigParseError(ConfigError):
    """Raised when a preference file exists but is not well-formed."""


def project_config_path(directory: Path | None = None) -> Path:
    return (directory or Path.cwd()) / CONFIG_FILENAME


def user_config_path(home: Path | None = None) -> Path:
    return (home or Path.home()) / CONFIG_FILENAME


def _parse(model: type[BaseModel], path: Path) -> BaseModel:
    try:
        return model.model_validate_json(path.read_text(encoding="utf-8"))
    except (ValidationError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Failed to parse {path}: {exc}") from exc


def _write(model: BaseModel, path: Path) -> None:
    path.write_text(model.model_dump_json(by_alias=True, indent=2), encoding="utf-8")


def load_project_preferences(directory: Path | None = None) -> ProjectPreferences:
    """Load the project record from ``directory`` (defaults to the current directory)."""

    path = project_config_path(directory)
    if not path.is_file():
        raise ConfigNotFoundError(f"{CONFIG_FILENAME} file not found. Please run 'create' first")
    logger.debug("Loading project preferences from {}", path)
    return _parse(ProjectPreferences, path)  # type: ignore[return-value]


def save_project_preferences(preferences: ProjectPreferences, directory: Path) -> Path:
    """Overwrite the project record inside ``directory``."""

    path = project_config_path(directory)
    _write(preferences, path)
    logger.debug("Saved project preferences to {}", path)
    return path


def load_user_preferences(home: Path | None = None) -> Optional[UserPreferences]:
    """Load the user record, returning ``None`` on first run."""

    path = user_config_path(home)
    if not path.is_file():
        logger.debug("No user preferences at {}", path)
        return None
    return _parse(UserPreferences, path)  # type: ignore[return-value]


def save_user_preferences(preferences: UserPreferences, home: Path | None = None) -> Path:
    """Overwrite the user record in the home directory."""

    path = user_config_path(home)
    _write(preferences, path)
    logger.debug("Saved user preferences to {}", path)
    return path


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ProjectPreferences",
    "UserPreferences",
    "load_project_preferences",
    "load_user_preferences",
    "save_project_preferences",
    "save_user_preferences",
]
