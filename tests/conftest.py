from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List

import pytest
from rich.console import Console

from netsuite_cli.config import ProjectPreferences, save_project_preferences
from netsuite_cli.console import OutputSettings, Terminal


class ScriptedInput:
    """Feeds prepared answers to a Terminal, one per prompt."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers: List[str] = list(answers)

    def __call__(self) -> str:
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@dataclass
class ScriptedSession:
    terminal: Terminal
    output: io.StringIO
    pauses: List[float] = field(default_factory=list)

    @property
    def text(self) -> str:
        return self.output.getvalue()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture()
def session_factory() -> Callable[..., ScriptedSession]:
    def _factory(answers: Iterable[str] = (), *, settings: OutputSettings | None = None) -> ScriptedSession:
        output = io.StringIO()
        pauses: List[float] = []
        console = Console(file=output, width=200, highlight=False, soft_wrap=True)
        terminal = Terminal(
            settings,
            console=console,
            error_console=console,
            reader=ScriptedInput(answers),
            sleep=pauses.append,
        )
        return ScriptedSession(terminal=terminal, output=output, pauses=pauses)

    return _factory


@pytest.fixture()
def preferences() -> ProjectPreferences:
    return ProjectPreferences(
        project_name="acme-proj",
        company_name="Acme",
        user_name="jdoe",
        user_email="jdoe@x.com",
    )


@pytest.fixture()
def project_root(tmp_path: Path, preferences: ProjectPreferences) -> Path:
    root = tmp_path / "acme-proj"
    root.mkdir()
    save_project_preferences(preferences, root)
    return root
