# SPDX-FileCopyrightText: 2025 shamir-scheme contributors
# SPDX-License-Identifier: MIT

# src/shamir_scheme/__init__.py

from .errors import InvalidValueError, MissingFieldError, SchemeError
from .scheme import DEFAULT_PRIME, Builder, CreationScheme
from .serialization import from_json, from_record, from_yaml, to_json, to_record, to_yaml

__all__ = [
    "CreationScheme",
    "DEFAULT_PRIME",
    "Builder",
    "SchemeError",
    "MissingFieldError",
    "InvalidValueError",
    "to_record",
    "from_record",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
]

__version__ = "0.1.0"
