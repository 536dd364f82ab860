"""Sensitive raw-data contract for card data value objects.

Every value object built from raw card-track input carries the same
capability set: report the raw input, say whether it is present, check
it against the field's maximum length, and clear it on demand.

INVARIANT: Clearing raw data never touches derived fields. Decoded
values are computed once at construction and outlive the raw input.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# Lone surrogates (e.g. undecodable argv bytes) must survive the round trip.
_ENCODING = "utf-8"
_ERRORS = "surrogatepass"


@runtime_checkable
class RawData(Protocol):
    """Capability contract for objects holding raw, possibly sensitive input."""

    @property
    def raw_data(self) -> str | None:
        """Raw input exactly as supplied, or None if absent or cleared."""
        ...

    def has_raw_data(self) -> bool:
        """Whether raw input is present and not blank."""
        ...

    def exceeds_maximum_length(self) -> bool:
        """Whether the trimmed raw input is longer than the field allows."""
        ...

    def clear_raw_data(self) -> None:
        """Discard the raw input. Safe to call more than once."""
        ...


class RawValue:
    """Mutable slot for one raw input string.

    The text is kept as UTF-8 in a ``bytearray`` so :meth:`clear` can zero
    the buffer in place before releasing it. This limits incidental
    exposure; it is not a guarantee against memory forensics.

    ``None`` (never supplied) and ``""`` (supplied but empty) are kept
    distinct until cleared.
    """

    __slots__ = ("_buffer",)

    def __init__(self, raw: str | None = None) -> None:
        self._buffer: bytearray | None = (
            None if raw is None else bytearray(raw, _ENCODING, _ERRORS)
        )

    @property
    def value(self) -> str | None:
        if self._buffer is None:
            return None
        return self._buffer.decode(_ENCODING, _ERRORS)

    def stripped(self) -> str:
        """Raw text without surrounding whitespace ("" when absent)."""
        value = self.value
        return value.strip() if value is not None else ""

    def is_present(self) -> bool:
        return bool(self.stripped())

    def exceeds(self, limit: int) -> bool:
        """Whether the trimmed raw text is longer than *limit* characters."""
        return len(self.stripped()) > limit

    def clear(self) -> None:
        """Overwrite and drop the buffer. No-op when already cleared."""
        if self._buffer is None:
            return
        for i in range(len(self._buffer)):
            self._buffer[i] = 0
        self._buffer = None

    def __repr__(self) -> str:
        state = "absent" if self._buffer is None else "present"
        return f"RawValue(<{state}>)"
