"""Reporting helpers for validation failures.

Provides environment-driven settings, structured logging setup and a typed
pydantic model for serializing failures raised by ``validations`` checks.
"""
