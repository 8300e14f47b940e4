"""Check modules must expose uniform guard-clause signatures.

Every public top-level function in a check module takes ``message`` as its
last positional parameter and is annotated ``-> None``.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards import iter_python_files, parse_file, report

CHECK_MODULES = {"arguments.py", "conditions.py"}


def check_function(path: Path, func: ast.FunctionDef) -> list[str]:
    errors: list[str] = []
    params = [*func.args.posonlyargs, *func.args.args]
    if not params or params[-1].arg != "message":
        errors.append(
            f"{path}:{func.lineno} check '{func.name}' must end with 'message'"
        )
    returns = func.returns
    if not (isinstance(returns, ast.Constant) and returns.value is None):
        errors.append(f"{path}:{func.lineno} check '{func.name}' must return None")
    return errors


def check_path(path: Path) -> list[str]:
    _, tree = parse_file(path)
    errors: list[str] = []
    for node in tree.body:
        if isinstance(node, ast.FunctionDef) and not node.name.startswith("_"):
            errors.extend(check_function(path, node))
    return errors


def run(roots: list[str]) -> int:
    errors: list[str] = []
    for path in iter_python_files(roots):
        if path.name in CHECK_MODULES:
            errors.extend(check_path(path))
    return report(errors)


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
