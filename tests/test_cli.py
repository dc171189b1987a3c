from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from datebook.cli import build_parser, main


@pytest.fixture
def storage(tmp_path: Path) -> Path:
    return tmp_path / "storage.json"


def _run(storage: Path, *argv: str) -> int:
    return main(["--storage", str(storage), *argv])


def _add_standup(storage: Path, capsys) -> str:
    code = _run(storage, "add", "--date", "2024-01-01", "--name", "Standup", "--start", "09:00", "--end", "09:15")
    assert code == 0
    line = capsys.readouterr().out.strip()
    return line.split()[0]


def test_add_then_list(storage, capsys):
    event_id = _add_standup(storage, capsys)

    assert _run(storage, "list", "--date", "2024-01-01") == 0
    out = capsys.readouterr().out
    assert event_id in out
    assert "1/1/2024  09:00-09:15  Standup" in out

    stored = orjson.loads(orjson.loads(storage.read_bytes())["events"])
    assert stored[0]["id"] == event_id


def test_list_empty(storage, capsys):
    assert _run(storage, "list") == 0
    assert capsys.readouterr().out.strip() == "No events added yet."


def test_list_search(storage, capsys):
    _add_standup(storage, capsys)
    assert _run(storage, "list", "--search", "STAND") == 0
    assert "Standup" in capsys.readouterr().out
    assert _run(storage, "list", "--search", "review") == 0
    assert capsys.readouterr().out.strip() == "No events added yet."


def test_add_reports_validation_error(storage, capsys):
    code = _run(storage, "add", "--date", "2024-01-01", "--name", "Standup", "--start", "10:00", "--end", "09:00")
    assert code == 1
    assert "Start time must be earlier than end time!" in capsys.readouterr().err
    assert not storage.exists()


def test_edit_changes_fields(storage, capsys):
    event_id = _add_standup(storage, capsys)

    assert _run(storage, "edit", event_id, "--end", "09:30", "--desc", "daily") == 0
    out = capsys.readouterr().out
    assert "09:00-09:30  Standup  (daily)" in out


def test_edit_rejects_bad_range(storage, capsys):
    event_id = _add_standup(storage, capsys)
    assert _run(storage, "edit", event_id, "--end", "08:00") == 1
    assert "Start time must be earlier than end time!" in capsys.readouterr().err


def test_edit_and_delete_unknown_id(storage, capsys):
    assert _run(storage, "edit", "missing", "--name", "x") == 1
    assert _run(storage, "delete", "missing") == 1
    assert capsys.readouterr().err.count("No event with id missing") == 2


def test_delete(storage, capsys):
    event_id = _add_standup(storage, capsys)
    assert _run(storage, "delete", event_id) == 0
    capsys.readouterr()
    assert _run(storage, "list") == 0
    assert capsys.readouterr().out.strip() == "No events added yet."


def test_corrupt_storage_warns_and_keeps_a_copy(storage, capsys):
    storage.write_bytes(orjson.dumps({"events": "{broken"}))
    assert _run(storage, "list") == 0
    captured = capsys.readouterr()
    assert "could not be read" in captured.err
    assert orjson.loads(storage.read_bytes())["events.corrupt"] == "{broken"


def test_default_storage_comes_from_settings(isolated_settings, capsys):
    assert main(["add", "--date", "2024-01-02", "--name", "Review", "--start", "14:00", "--end", "15:00"]) == 0
    assert (isolated_settings / "storage.json").exists()


def test_parser_rejects_bad_date():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["add", "--date", "1/1/2024", "--name", "x", "--start", "09:00", "--end", "10:00"])


def test_unreadable_storage_file_is_reported(storage, capsys):
    storage.write_text("{not json", encoding="utf-8")
    assert _run(storage, "list") == 0
    captured = capsys.readouterr()
    assert "could not be read and was moved" in captured.err
    assert str(storage.with_name("storage.json.corrupt")) in captured.err
    assert captured.out.strip() == "No events added yet."


def test_ephemeral_run_writes_nothing(isolated_settings, storage, capsys):
    argv = ["--ephemeral", "--storage", str(storage)]
    assert main([*argv, "add", "--date", "2024-01-01", "--name", "Standup", "--start", "09:00", "--end", "09:15"]) == 0
    assert "Standup" in capsys.readouterr().out
    assert not storage.exists()
    assert not (isolated_settings / "storage.json").exists()

    assert main([*argv, "list"]) == 0
    assert capsys.readouterr().out.strip() == "No events added yet."
