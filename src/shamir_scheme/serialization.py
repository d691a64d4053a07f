# SPDX-FileCopyrightText: 2025 shamir-scheme contributors
# SPDX-License-Identifier: MIT

"""Wire format for :class:`~shamir_scheme.scheme.CreationScheme`.

A scheme is encoded as a record with exactly three keys::

    {"requiredShareCount": 2, "totalShareCount": 3, "prime": "0x7"}

The prime is written as a ``0x`` hexadecimal string. Consumers with
fixed-width numbers cannot truncate it, and power-of-two bases are exempt from
the interpreter's int/str digit limit, so primes of any size survive. Decimal
strings and plain integers are accepted on input. Decoding always goes through
:class:`~shamir_scheme.scheme.Builder`, so a record can never produce a scheme
that direct construction would reject.
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict, Mapping

import yaml

from .errors import InvalidValueError
from .scheme import Builder, CreationScheme

WIRE_FIELDS = {
    "requiredShareCount": "required_share_count",
    "totalShareCount": "total_share_count",
    "prime": "prime",
}

_HEX = re.compile(r"^[+-]?0[xX][0-9a-fA-F]+$")
_DECIMAL = re.compile(r"^[+-]?[0-9]+$")


def to_record(scheme: CreationScheme) -> Dict[str, Any]:
    return {
        "requiredShareCount": scheme.required_share_count,
        "totalShareCount": scheme.total_share_count,
        "prime": hex(scheme.prime),
    }


def _malformed_prime(value: str) -> InvalidValueError:
    shown = value if len(value) <= 64 else value[:61] + "..."
    return InvalidValueError(
        "record_format",
        f"The prime must be a hexadecimal or decimal integer. Current value is {shown!r}.",
        value,
    )


def _decode_prime(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip()
    if _HEX.match(text):
        return int(text, 16)
    if not _DECIMAL.match(text):
        raise _malformed_prime(value)
    try:
        return int(text)
    except ValueError as exc:
        # Decimal strings past the interpreter's digit limit.
        raise _malformed_prime(value) from exc


def from_record(record: Mapping[str, Any]) -> CreationScheme:
    """Rebuild a scheme from a decoded record.

    Absent keys surface as :class:`~shamir_scheme.errors.MissingFieldError`
    from the builder; anything else malformed raises
    :class:`~shamir_scheme.errors.InvalidValueError`.
    """
    if not isinstance(record, Mapping):
        raise InvalidValueError(
            "record_format",
            f"A creation scheme record must be a mapping, got {type(record).__name__}.",
            record,
        )
    unknown = sorted(str(key) for key in record if key not in WIRE_FIELDS)
    if unknown:
        raise InvalidValueError(
            "record_format",
            "Unexpected fields in creation scheme record: " + ", ".join(unknown) + ".",
            *unknown,
        )

    builder = Builder()
    if "requiredShareCount" in record:
        builder.set_required_share_count(record["requiredShareCount"])
    if "totalShareCount" in record:
        builder.set_total_share_count(record["totalShareCount"])
    if "prime" in record:
        builder.set_prime(_decode_prime(record["prime"]))
    return builder.build()


def to_json(scheme: CreationScheme, *, indent: int | None = None) -> str:
    return json.dumps(to_record(scheme), indent=indent)


def from_json(text: str | bytes) -> CreationScheme:
    # ValueError covers JSONDecodeError, undecodable bytes and oversized integer literals.
    try:
        record = json.loads(text)
    except ValueError as exc:
        raise InvalidValueError(
            "record_format", f"Creation scheme JSON is malformed: {exc}", text
        ) from exc
    return from_record(record)


def to_yaml(scheme: CreationScheme) -> str:
    return yaml.safe_dump(to_record(scheme), sort_keys=False)


def from_yaml(text: str | bytes) -> CreationScheme:
    try:
        record = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as exc:
        raise InvalidValueError(
            "record_format", f"Creation scheme YAML is malformed: {exc}", text
        ) from exc
    return from_record(record)


__all__ = [
    "WIRE_FIELDS",
    "to_record",
    "from_record",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
]
