"""ServiceCode value object — positional decoding of the stripe service code.

Decoding is total: any input (absent, empty, short, long, noisy) yields a
ServiceCode. Positions that cannot be read fall back to ``UNKNOWN``.
Stripe read errors are common, so there is no invalid state, only
unknown positions and the :meth:`ServiceCode.exceeds_maximum_length` flag.

INVARIANT: digits and decoded positions are fixed at construction and
never re-derived from the raw input.
"""

from __future__ import annotations

from typing import Any, TypeVar

from magstripe.domain.raw_data import RawValue
from magstripe.domain.service_codes import (
    ServiceCode1,
    ServiceCode2,
    ServiceCode3,
    lookup,
)

MAXIMUM_LENGTH = 3

_ASCII_DIGITS = frozenset("0123456789")

S = TypeVar("S", ServiceCode1, ServiceCode2, ServiceCode3)


def normalize_service_code(raw: str | None) -> str:
    """Strip whitespace and drop every character that is not an ASCII digit."""
    if raw is None:
        return ""
    return "".join(ch for ch in raw.strip() if ch in _ASCII_DIGITS)


def decode_position(digits: str, position: int, enum_cls: type[S]) -> S:
    """Decode the digit at *position* (0-based) against *enum_cls*.

    Returns ``enum_cls.UNKNOWN`` if *digits* is too short or the digit has
    no meaning at that position.
    """
    if len(digits) <= position:
        return enum_cls.UNKNOWN
    return lookup(enum_cls, int(digits[position]))


class ServiceCode:
    """Three-digit service code read from magnetic track data.

    Satisfies the :class:`~magstripe.domain.raw_data.RawData` contract by
    composing a :class:`~magstripe.domain.raw_data.RawValue`.

    Equality and hashing use the normalized digits only.
    """

    __slots__ = ("_raw", "_service_code", "_service_code1", "_service_code2", "_service_code3")

    def __init__(self, raw_service_code: str | None = None) -> None:
        self._raw = RawValue(raw_service_code)
        self._service_code = normalize_service_code(raw_service_code)
        self._service_code1 = decode_position(self._service_code, 0, ServiceCode1)
        self._service_code2 = decode_position(self._service_code, 1, ServiceCode2)
        self._service_code3 = decode_position(self._service_code, 2, ServiceCode3)

    # --- Decoded fields ---

    @property
    def service_code(self) -> str:
        """Normalized digit string."""
        return self._service_code

    @property
    def service_code1(self) -> ServiceCode1:
        return self._service_code1

    @property
    def service_code2(self) -> ServiceCode2:
        return self._service_code2

    @property
    def service_code3(self) -> ServiceCode3:
        return self._service_code3

    def has_service_code(self) -> bool:
        """True when all three positions decoded to a known member."""
        return not (
            self._service_code1 is ServiceCode1.UNKNOWN
            or self._service_code2 is ServiceCode2.UNKNOWN
            or self._service_code3 is ServiceCode3.UNKNOWN
        )

    # --- RawData contract ---

    @property
    def raw_data(self) -> str | None:
        return self._raw.value

    def has_raw_data(self) -> bool:
        return self._raw.is_present()

    def exceeds_maximum_length(self) -> bool:
        """Checked on the trimmed raw input, so non-digit noise counts."""
        return self._raw.exceeds(MAXIMUM_LENGTH)

    def clear_raw_data(self) -> None:
        self._raw.clear()

    # --- Views ---

    def describe(self) -> dict[str, Any]:
        """JSON-ready view of the decoded code. Never includes raw input."""
        positions = (self._service_code1, self._service_code2, self._service_code3)
        return {
            "service_code": self._service_code,
            "has_service_code": self.has_service_code(),
            "positions": [
                {
                    "position": index,
                    "value": None if member.is_unknown else member.value,
                    "name": member.name,
                    "description": member.description,
                }
                for index, member in enumerate(positions, start=1)
            ],
        }

    # --- Object protocol ---

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ServiceCode):
            return NotImplemented
        return self._service_code == other._service_code

    def __hash__(self) -> int:
        return hash(self._service_code)

    def __str__(self) -> str:
        return self._service_code

    def __repr__(self) -> str:
        return f"ServiceCode({self._service_code!r})"

    def __getstate__(self) -> dict[str, Any]:
        # Raw input is not carried across pickling.
        return {
            "service_code": self._service_code,
            "service_code1": self._service_code1,
            "service_code2": self._service_code2,
            "service_code3": self._service_code3,
        }

    def __setstate__(self, state: dict[str, Any]) -> None:
        self._raw = RawValue()
        self._service_code = state["service_code"]
        self._service_code1 = state["service_code1"]
        self._service_code2 = state["service_code2"]
        self._service_code3 = state["service_code3"]
