from __future__ import annotations

import ast
import sys

from tools.guards import iter_python_files, parse_file, report


def _is_print_call(node: ast.AST) -> bool:
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "print"
    )


def run(roots: list[str]) -> int:
    errors: list[str] = []
    for path in iter_python_files(roots):
        _, tree = parse_file(path)
        errors.extend(
            f"{path}:{node.lineno} use logger; 'print' is forbidden"
            for node in ast.walk(tree)
            if _is_print_call(node)
        )
    return report(errors)


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
