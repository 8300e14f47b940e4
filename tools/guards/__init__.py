"""Guard runners for strict repository standards.

Each guard exposes a `run(roots: list[str]) -> int` function that returns
non-zero on violations. Shared file walking and reporting live here.
"""

from __future__ import annotations

import ast
import sys
from collections.abc import Iterable
from pathlib import Path


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if base.is_file() and base.suffix == ".py":
            yield base
            continue
        if not base.exists():
            continue
        yield from sorted(base.rglob("*.py"))


def parse_file(path: Path) -> tuple[str, ast.Module]:
    try:
        text = path.read_text(encoding="utf-8")
        tree = ast.parse(text, filename=str(path))
    except (OSError, SyntaxError) as exc:
        # Surface parse errors explicitly and re-raise to fail the check
        sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
        raise
    return text, tree


def report(errors: list[str]) -> int:
    if errors:
        sys.stderr.write("\n".join(errors) + "\n")
        return 1
    return 0
