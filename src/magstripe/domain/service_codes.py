"""Service code position enums and digit lookup tables.

A magnetic stripe service code has three digits, each read against its
own closed table:

- Position 1: interchange rules and chip technology.
- Position 2: authorization processing.
- Position 3: range of allowed services and PIN requirements.

Digits without a defined meaning at a position resolve to that
position's ``UNKNOWN`` member. ``UNKNOWN`` carries ``-1``, which is
never a digit.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, TypeVar

UNKNOWN_VALUE = -1


class ServiceCodeType(Protocol):
    """Common shape of the three position enums."""

    @property
    def value(self) -> int: ...

    @property
    def description(self) -> str: ...


class _ServiceCodeEnum(Enum):
    """Enum member with a single-digit value and a description."""

    description: str

    def __new__(cls, value: int, description: str) -> _ServiceCodeEnum:
        member = object.__new__(cls)
        member._value_ = value
        member.description = description
        return member

    @property
    def is_unknown(self) -> bool:
        return self.value == UNKNOWN_VALUE

    def __str__(self) -> str:
        if self.is_unknown:
            return self.description
        return f"{self.value} - {self.description}"


class ServiceCode1(_ServiceCodeEnum):
    """Position 1: interchange and technology."""

    INTERNATIONAL = (1, "International interchange OK")
    INTERNATIONAL_IC = (2, "International interchange, use IC (chip) where feasible")
    NATIONAL = (5, "National interchange only except under bilateral agreement")
    NATIONAL_IC = (
        6,
        "National interchange only except under bilateral agreement, "
        "use IC (chip) where feasible",
    )
    PRIVATE = (7, "No interchange except under bilateral agreement (closed loop)")
    TEST = (9, "Test")
    UNKNOWN = (UNKNOWN_VALUE, "Unknown")


class ServiceCode2(_ServiceCodeEnum):
    """Position 2: authorization processing."""

    NORMAL = (0, "Normal")
    ONLINE = (2, "Contact issuer via online means")
    ONLINE_EXCEPT_BILATERAL = (
        4,
        "Contact issuer via online means except under bilateral agreement",
    )
    UNKNOWN = (UNKNOWN_VALUE, "Unknown")


class ServiceCode3(_ServiceCodeEnum):
    """Position 3: range of services and PIN requirements."""

    PIN_REQUIRED = (0, "No restrictions, PIN required")
    NO_RESTRICTIONS = (1, "No restrictions")
    GOODS_AND_SERVICES = (2, "Goods and services only (no cash)")
    ATM_ONLY = (3, "ATM only, PIN required")
    CASH_ONLY = (4, "Cash only")
    GOODS_AND_SERVICES_PIN = (5, "Goods and services only (no cash), PIN required")
    PIN_IF_FEASIBLE = (6, "No restrictions, use PIN where feasible")
    GOODS_AND_SERVICES_PIN_IF_FEASIBLE = (
        7,
        "Goods and services only (no cash), PIN required where feasible",
    )
    UNKNOWN = (UNKNOWN_VALUE, "Unknown")


S = TypeVar("S", ServiceCode1, ServiceCode2, ServiceCode3)


def _by_digit(enum_cls: type[S]) -> dict[int, S]:
    """Build a digit -> member table in declaration order, first match wins."""
    table: dict[int, S] = {}
    for member in enum_cls:
        if member.is_unknown:
            continue
        table.setdefault(member.value, member)
    return table


# --- Reverse lookup tables (one per position) ---

SERVICE_CODE_1_BY_DIGIT: dict[int, ServiceCode1] = _by_digit(ServiceCode1)
SERVICE_CODE_2_BY_DIGIT: dict[int, ServiceCode2] = _by_digit(ServiceCode2)
SERVICE_CODE_3_BY_DIGIT: dict[int, ServiceCode3] = _by_digit(ServiceCode3)

LOOKUP_TABLES: dict[type[_ServiceCodeEnum], dict[int, _ServiceCodeEnum]] = {
    ServiceCode1: SERVICE_CODE_1_BY_DIGIT,
    ServiceCode2: SERVICE_CODE_2_BY_DIGIT,
    ServiceCode3: SERVICE_CODE_3_BY_DIGIT,
}


def lookup(enum_cls: type[S], digit: int) -> S:
    """Return the member of *enum_cls* for *digit*, or its ``UNKNOWN`` member."""
    member = LOOKUP_TABLES[enum_cls].get(digit)
    if member is None:
        return enum_cls.UNKNOWN
    return member  # type: ignore[return-value]
