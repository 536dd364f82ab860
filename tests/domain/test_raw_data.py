"""Tests for the RawData contract and the RawValue holder."""

import pytest

from magstripe.domain.raw_data import RawData, RawValue
from magstripe.domain.service_code import ServiceCode


class TestRawValue:
    def test_absent_by_default(self) -> None:
        raw = RawValue()
        assert raw.value is None
        assert raw.stripped() == ""
        assert not raw.is_present()

    def test_empty_is_distinct_from_absent(self) -> None:
        raw = RawValue("")
        assert raw.value == ""
        assert not raw.is_present()

    def test_preserves_input_exactly(self) -> None:
        raw = RawValue("  2 0 1\t")
        assert raw.value == "  2 0 1\t"
        assert raw.stripped() == "2 0 1"

    def test_whitespace_only_is_not_present(self) -> None:
        assert not RawValue("   ").is_present()

    def test_non_ascii_round_trips(self) -> None:
        assert RawValue("２０１é").value == "２０１é"

    def test_lone_surrogate_round_trips(self) -> None:
        raw = RawValue("2\udc8001")
        assert raw.value == "2\udc8001"
        assert raw.exceeds(3)
        raw.clear()
        assert raw.value is None

    @pytest.mark.parametrize(
        "text,limit,expected",
        [
            ("201", 3, False),
            ("2011", 3, True),
            ("  201  ", 3, False),
            ("1a2b3c", 3, True),
            ("", 3, False),
        ],
    )
    def test_exceeds(self, text: str, limit: int, expected: bool) -> None:
        assert RawValue(text).exceeds(limit) is expected

    def test_clear_zeroes_buffer(self) -> None:
        raw = RawValue("201")
        buffer = raw._buffer
        assert buffer is not None
        raw.clear()
        assert raw.value is None
        assert bytes(buffer) == b"\x00\x00\x00"

    def test_clear_is_idempotent(self) -> None:
        raw = RawValue("201")
        raw.clear()
        raw.clear()
        assert raw.value is None

    def test_clear_when_absent(self) -> None:
        raw = RawValue()
        raw.clear()
        assert raw.value is None

    def test_repr_hides_value(self) -> None:
        assert "201" not in repr(RawValue("201"))
        assert repr(RawValue()) == "RawValue(<absent>)"


class TestRawDataProtocol:
    def test_service_code_satisfies_contract(self) -> None:
        assert isinstance(ServiceCode("201"), RawData)

    def test_plain_object_does_not(self) -> None:
        assert not isinstance(object(), RawData)
