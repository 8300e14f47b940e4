"""Internal tooling for repository guard checks.

Guard scripts enforce the standards the validation library is held to:
- No use of typing.Any or casts, and no "type: ignore" comments
- No bare except and a re-raise in every handler
- No use of print; use centralized logging instead
- Every public check takes a trailing ``message`` and returns None

Run them all with ``python -m tools.guard``.
"""
