from __future__ import annotations

from pathlib import Path

import pytest

from tools import guard
from tools.guards import (
    exceptions_guard,
    iter_python_files,
    logging_guard,
    signature_guard,
    typing_guard,
)


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_iter_python_files_accepts_files_and_skips_missing(tmp_path: Path) -> None:
    module = _write(tmp_path, "a.py", "x = 1\n")
    _write(tmp_path, "notes.txt", "x\n")
    found = list(iter_python_files([str(tmp_path), str(tmp_path / "missing")]))
    assert found == [module]
    assert list(iter_python_files([str(module)])) == [module]


def test_typing_guard_flags_any_cast_and_ignores(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(
        tmp_path,
        "bad.py",
        "from typing import Any, cast\n"
        "x: Any = cast(int, 1)  # type: ignore\n",
    )

    rc = typing_guard.run([str(tmp_path)])
    err = capsys.readouterr().err

    assert rc == 1
    assert "forbidden typing import 'Any'" in err
    assert "forbidden use of cast()" in err
    assert "forbidden 'type: ignore'" in err


def test_typing_guard_ignores_marker_inside_strings(tmp_path: Path) -> None:
    _write(tmp_path, "ok.py", 'NOTE = "type: ignore"\n')
    assert typing_guard.run([str(tmp_path)]) == 0


def test_exceptions_guard_flags_bare_and_swallowing_handlers(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(
        tmp_path,
        "bad.py",
        "try:\n    x = 1\nexcept:\n    pass\n"
        "try:\n    y = 1\nexcept ValueError:\n    y = 2\n",
    )

    rc = exceptions_guard.run([str(tmp_path)])
    err = capsys.readouterr().err

    assert rc == 1
    assert "bare 'except' is forbidden" in err
    assert "except without re-raise is forbidden" in err


def test_exceptions_guard_allows_re_raise(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "ok.py",
        "try:\n    x = 1\n"
        "except ValueError as exc:\n    raise RuntimeError() from exc\n",
    )
    assert exceptions_guard.run([str(tmp_path)]) == 0


def test_logging_guard_flags_print(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path, "bad.py", "print('hi')\n")

    rc = logging_guard.run([str(tmp_path)])

    assert rc == 1
    assert "'print' is forbidden" in capsys.readouterr().err


def test_signature_guard_checks_only_check_modules(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    body = (
        "def good(value: int, message: object) -> None:\n    pass\n"
        "def _helper(value: int) -> bool:\n    return True\n"
        "def no_message(value: int) -> None:\n    pass\n"
        "def returns_bool(value: int, message: object) -> bool:\n    return True\n"
    )
    _write(tmp_path, "arguments.py", body)
    _write(tmp_path, "helpers.py", body)

    rc = signature_guard.run([str(tmp_path)])
    err = capsys.readouterr().err

    assert rc == 1
    assert "'no_message' must end with 'message'" in err
    assert "'returns_bool' must return None" in err
    assert "good" not in err
    assert "helpers.py" not in err


def test_repository_passes_all_guards(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(Path(__file__).resolve().parent.parent)
    assert guard.main() == 0


def test_run_guards_stops_at_first_failure(tmp_path: Path) -> None:
    _write(tmp_path, "bad.py", "print('hi')\n")
    assert guard.run_guards([str(tmp_path)]) == 1
