from __future__ import annotations

import ast
import sys

from tools.guards import iter_python_files, parse_file, report


def handler_has_raise(handler: ast.ExceptHandler) -> bool:
    return any(isinstance(node, ast.Raise) for node in ast.walk(handler))


def run(roots: list[str]) -> int:
    errors: list[str] = []
    for path in iter_python_files(roots):
        _, tree = parse_file(path)
        for node in ast.walk(tree):
            if not isinstance(node, ast.ExceptHandler):
                continue
            if node.type is None:
                errors.append(f"{path}:{node.lineno} bare 'except' is forbidden")
            if not handler_has_raise(node):
                errors.append(
                    f"{path}:{node.lineno} except without re-raise is forbidden"
                )
    return report(errors)


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
