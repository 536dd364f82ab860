"""Tests for the service code position enums and lookup tables."""

import pytest

from magstripe.domain.service_codes import (
    LOOKUP_TABLES,
    SERVICE_CODE_1_BY_DIGIT,
    SERVICE_CODE_2_BY_DIGIT,
    SERVICE_CODE_3_BY_DIGIT,
    UNKNOWN_VALUE,
    ServiceCode1,
    ServiceCode2,
    ServiceCode3,
    lookup,
)

ENUM_CASES = [
    (ServiceCode1, {1, 2, 5, 6, 7, 9}),
    (ServiceCode2, {0, 2, 4}),
    (ServiceCode3, {0, 1, 2, 3, 4, 5, 6, 7}),
]


@pytest.mark.parametrize(
    "enum_cls,expected_digits",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_digits(enum_cls: type, expected_digits: set[int]) -> None:
    """Each enum defines exactly the expected digits plus UNKNOWN."""
    digits = {member.value for member in enum_cls if member is not enum_cls.UNKNOWN}
    assert digits == expected_digits
    assert enum_cls.UNKNOWN.value == UNKNOWN_VALUE
    for member in enum_cls:
        assert member.description


@pytest.mark.parametrize(
    "enum_cls,table",
    [
        (ServiceCode1, SERVICE_CODE_1_BY_DIGIT),
        (ServiceCode2, SERVICE_CODE_2_BY_DIGIT),
        (ServiceCode3, SERVICE_CODE_3_BY_DIGIT),
    ],
)
def test_lookup_table_excludes_unknown(enum_cls: type, table: dict) -> None:
    assert enum_cls.UNKNOWN not in table.values()
    assert UNKNOWN_VALUE not in table
    assert LOOKUP_TABLES[enum_cls] is table
    for digit, member in table.items():
        assert member.value == digit


class TestLookup:
    def test_known_digits(self) -> None:
        assert lookup(ServiceCode1, 2) is ServiceCode1.INTERNATIONAL_IC
        assert lookup(ServiceCode2, 0) is ServiceCode2.NORMAL
        assert lookup(ServiceCode3, 1) is ServiceCode3.NO_RESTRICTIONS

    @pytest.mark.parametrize(
        "enum_cls,digit",
        [
            (ServiceCode1, 0),
            (ServiceCode1, 3),
            (ServiceCode1, 8),
            (ServiceCode2, 1),
            (ServiceCode2, 9),
            (ServiceCode3, 8),
            (ServiceCode3, 9),
        ],
    )
    def test_undefined_digit_is_unknown(self, enum_cls: type, digit: int) -> None:
        assert lookup(enum_cls, digit) is enum_cls.UNKNOWN

    def test_unknown_value_is_not_looked_up(self) -> None:
        assert lookup(ServiceCode3, UNKNOWN_VALUE) is ServiceCode3.UNKNOWN


class TestMemberRendering:
    def test_str_includes_digit_and_description(self) -> None:
        assert str(ServiceCode2.NORMAL) == "0 - Normal"

    def test_unknown_str(self) -> None:
        assert str(ServiceCode1.UNKNOWN) == "Unknown"

    def test_is_unknown(self) -> None:
        assert ServiceCode3.UNKNOWN.is_unknown
        assert not ServiceCode3.PIN_REQUIRED.is_unknown

    def test_enums_are_distinct(self) -> None:
        """Same digit in different positions maps to different members."""
        assert lookup(ServiceCode2, 2) != lookup(ServiceCode3, 2)
