# SPDX-FileCopyrightText: 2025 shamir-scheme contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised while assembling or decoding a creation scheme."""
from __future__ import annotations

from typing import Any, Iterable


class SchemeError(ValueError):
    """Base class for every failure raised by :mod:`shamir_scheme`."""


class MissingFieldError(SchemeError):
    """Raised when ``build()`` is called before every field was set."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(
            "The following fields were never set: " + ", ".join(self.fields) + "."
        )


class InvalidValueError(SchemeError):
    """Raised when a field value breaks one of the scheme rules.

    ``rule`` identifies the broken rule and ``values`` carries the offending
    values in the order they appear in the message.
    """

    def __init__(self, rule: str, message: str, *values: Any) -> None:
        self.rule = rule
        self.values = values
        super().__init__(message)


__all__ = ["SchemeError", "MissingFieldError", "InvalidValueError"]
