# SPDX-FileCopyrightText: 2025 shamir-scheme contributors
# SPDX-License-Identifier: MIT

"""Parameters for sharing a secret with Shamir's Secret Sharing.

:class:`CreationScheme` is an immutable value holding the required share
count, the total share count and the prime of the finite field. Instances can
only exist in a valid state: the rules below are checked on every
construction path, whether through :class:`Builder` or directly.

1. The required share count is at least 2.
2. The required share count does not exceed the total share count.
3. The prime is greater than the total share count.

The prime must also exceed the secret being shared, but the secret is not
known here; the split routine checks that.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidValueError, MissingFieldError

_logger = logging.getLogger(__name__)

FIELDS = ("required_share_count", "total_share_count", "prime")

_LABELS = {
    "required_share_count": "required share count",
    "total_share_count": "total share count",
    "prime": "prime",
}

_UNSET: Any = object()

# Mersenne prime 2**127 - 1, large enough for secrets below 16 bytes.
DEFAULT_PRIME = 2**127 - 1

# Below this size a prime is shown in decimal; larger values are shown in hex
# so repr and messages stay clear of the int-to-str digit limit.
_DECIMAL_DISPLAY_BITS = 4096


def format_prime(prime: int) -> str:
    if prime.bit_length() <= _DECIMAL_DISPLAY_BITS:
        return str(prime)
    return hex(prime)


def _require_int(field: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(
            "field_type",
            f"The {_LABELS[field]} must be an integer. Current value is {value!r}.",
            value,
        )


def _validate(required_share_count: int, total_share_count: int, prime: int) -> None:
    _require_int("required_share_count", required_share_count)
    _require_int("total_share_count", total_share_count)
    _require_int("prime", prime)

    if required_share_count < 2:
        raise InvalidValueError(
            "required_share_count_minimum",
            "The required share count must be at least 2. "
            f"Current value is {required_share_count}.",
            required_share_count,
        )
    if required_share_count > total_share_count:
        raise InvalidValueError(
            "required_exceeds_total",
            "The required share count must not exceed the total share count. "
            f"Current values are {required_share_count} and {total_share_count} respectively.",
            required_share_count,
            total_share_count,
        )
    if prime <= total_share_count:
        raise InvalidValueError(
            "prime_too_small",
            "The prime must be greater than the total share count. "
            f"Current values are {format_prime(prime)} and {total_share_count} respectively.",
            prime,
            total_share_count,
        )


@dataclass(frozen=True, repr=False)
class CreationScheme:
    """Defines the parameters to use when sharing a secret."""

    required_share_count: int
    total_share_count: int
    prime: int

    def __post_init__(self) -> None:
        _validate(self.required_share_count, self.total_share_count, self.prime)

    def __repr__(self) -> str:
        return (
            f"CreationScheme(required_share_count={self.required_share_count}, "
            f"total_share_count={self.total_share_count}, prime={format_prime(self.prime)})"
        )

    @classmethod
    def builder(cls) -> "Builder":
        return Builder()


class Builder:
    """Collects candidate values and validates them together in :meth:`build`.

    Setters store whatever they are given; the rules relate all three fields,
    so nothing is checked until :meth:`build`. A builder is meant for a single
    caller and is not safe to populate from several threads.
    """

    def __init__(self) -> None:
        self._values: Dict[str, Any] = dict.fromkeys(FIELDS, _UNSET)

    def set_required_share_count(self, count: int) -> "Builder":
        """Set the minimum number of shares needed to recover the secret."""
        self._values["required_share_count"] = count
        return self

    def set_total_share_count(self, count: int) -> "Builder":
        """Set the total number of shares to create."""
        self._values["total_share_count"] = count
        return self

    def set_prime(self, prime: int) -> "Builder":
        """Set the prime defining the finite field used to create the shares."""
        self._values["prime"] = prime
        return self

    def set_default_prime(self) -> "Builder":
        """Set the prime to :data:`DEFAULT_PRIME`."""
        return self.set_prime(DEFAULT_PRIME)

    def build(self) -> CreationScheme:
        """Return an immutable :class:`CreationScheme` based on this builder.

        Raises :class:`MissingFieldError` if any field was never set and
        :class:`InvalidValueError` for the first rule the values break.
        """
        missing = [name for name in FIELDS if self._values[name] is _UNSET]
        if missing:
            _logger.debug("Creation scheme rejected, missing fields: %s", ", ".join(missing))
            raise MissingFieldError(missing)

        try:
            scheme = CreationScheme(**self._values)
        except InvalidValueError as exc:
            _logger.debug("Creation scheme rejected: %s", exc)
            raise

        _logger.debug(
            "Built creation scheme: %s of %s shares",
            scheme.required_share_count,
            scheme.total_share_count,
        )
        return scheme


__all__ = ["DEFAULT_PRIME", "FIELDS", "CreationScheme", "Builder", "format_prime"]
