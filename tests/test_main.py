# tests/test_main.py

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.cli import main as main_mod
from todo_list.cli.bootstrap import create_initial_state, resolve_tasks_file
from todo_list.tasks.task_models import Task, decode_tasks
from todo_list.tasks.task_store import JsonFileTaskStore


@pytest.fixture()
def run_main(monkeypatch: pytest.MonkeyPatch, settings: SimpleNamespace):
    """Run main() with test settings and the given stdin text."""

    def _run(argv: list[str], stdin: str = "") -> int:
        monkeypatch.setattr(main_mod, "get_settings", lambda: settings)
        monkeypatch.setattr(main_mod, "setup_logging", lambda **kwargs: None)
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
        return main_mod.main(argv)

    return _run


def test_resolve_tasks_file(settings: SimpleNamespace) -> None:
    assert resolve_tasks_file("my.json", settings) == Path("my.json")
    assert resolve_tasks_file("   ", settings) == settings.tasks_file
    assert resolve_tasks_file(None, settings) == settings.tasks_file


def test_create_initial_state_wires_store(settings: SimpleNamespace, tasks_file: Path) -> None:
    state = create_initial_state(settings=settings, tasks_file=tasks_file)

    assert isinstance(state.task_store, JsonFileTaskStore)
    assert state.task_store.path == tasks_file
    assert state.commands.store is state.task_store
    assert state.settings is settings


def test_startup_error_is_printed(run_main, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = run_main([str(tmp_path / "missing.json")], "tasks\n")

    assert code == 1
    assert capsys.readouterr().out == "Error: File 'missing.json' not exists\n"


def test_blank_file_at_startup(run_main, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "empty.json"
    path.write_bytes(b"")

    assert run_main([str(path)]) == 1
    assert capsys.readouterr().out == "Error: File 'empty.json' is blank\n"


def test_runs_commands_until_eof(run_main, tasks_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = run_main([str(tasks_file)], "create buy milk\nactivate 2\nnope\n")

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Task with name buy milk created",
        "Task with id: 2 activated",
        "command 'nope' not found",
    ]
    assert decode_tasks(tasks_file.read_text("utf-8"))[-1] == Task("buy milk", False, 3)


def test_default_file_comes_from_settings(
    run_main, settings: SimpleNamespace, capsys: pytest.CaptureFixture[str]
) -> None:
    settings.tasks_file.write_text("[]", "utf-8")

    assert run_main([], "create x\n") == 0
    assert decode_tasks(settings.tasks_file.read_text("utf-8")) == [Task("x", False, 1)]


def test_unreadable_file_at_startup(
    run_main, tasks_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def denied(self, *args, **kwargs) -> str:
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "read_text", denied)

    assert run_main([str(tasks_file)]) == 1
    assert capsys.readouterr().out == f"Error: File '{tasks_file.name}' can't be read\n"
