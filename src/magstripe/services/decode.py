"""DecodeService — decode raw service codes into ServiceResult payloads.

The domain decoder never fails; this layer turns its unknown positions
and over-length flag into warnings, or into an error when strict mode is
on. Raw input is cleared after decoding unless configured otherwise.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import structlog

from magstripe.domain.service_code import MAXIMUM_LENGTH, ServiceCode
from magstripe.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from magstripe.config.settings import MagstripeSettings

logger = structlog.get_logger(__name__)


class DecodeService:
    """Decode service codes according to the ``[decode]`` settings."""

    def __init__(self, settings: MagstripeSettings | None = None) -> None:
        if settings is None:
            from magstripe.config.settings import MagstripeSettings

            settings = MagstripeSettings()
        self._settings = settings

    def decode(self, raw: str | None) -> ServiceResult:
        """Decode a single raw service code."""
        data, warnings = self._decode_one(raw)
        if self._settings.decode.strict and warnings:
            return ServiceResult(
                ok=False,
                op="decode_service_code",
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="INVALID_SERVICE_CODE",
                    message=f"Service code {data['service_code']!r} is not valid",
                    detail={"reasons": warnings},
                ),
            )
        return ServiceResult(ok=True, op="decode_service_code", data=data, warnings=warnings)

    def decode_many(self, raws: Iterable[str | None]) -> ServiceResult:
        """Decode several raw service codes, preserving input order.

        Warnings are prefixed with the item index. In strict mode the
        result fails if any item is invalid.
        """
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        invalid: list[int] = []
        for index, raw in enumerate(raws):
            data, item_warnings = self._decode_one(raw)
            items.append(data)
            if item_warnings:
                invalid.append(index)
                warnings.extend(f"[{index}] {w}" for w in item_warnings)

        data = {"items": items, "count": len(items)}
        meta = {"invalid_count": len(invalid)}
        if self._settings.decode.strict and invalid:
            return ServiceResult(
                ok=False,
                op="decode_service_codes",
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="INVALID_SERVICE_CODE",
                    message=f"{len(invalid)} of {len(items)} service codes are not valid",
                    detail={"invalid_indexes": invalid},
                ),
                meta=meta,
            )
        return ServiceResult(
            ok=True,
            op="decode_service_codes",
            data=data,
            warnings=warnings,
            meta=meta,
        )

    def _decode_one(self, raw: str | None) -> tuple[dict[str, Any], list[str]]:
        code = ServiceCode(raw)
        over_length = code.exceeds_maximum_length()
        if self._settings.decode.clear_raw_data:
            code.clear_raw_data()

        data = code.describe()
        warnings: list[str] = []
        if over_length:
            warnings.append(f"Service code exceeds maximum length of {MAXIMUM_LENGTH}")
        for position in data["positions"]:
            if position["value"] is None:
                warnings.append(f"Position {position['position']} could not be decoded")

        data["exceeds_maximum_length"] = over_length
        data["has_raw_data"] = code.has_raw_data()

        logger.debug(
            "service_code_decoded",
            service_code=code.service_code,
            has_service_code=code.has_service_code(),
            exceeds_maximum_length=over_length,
            has_raw_data=code.has_raw_data(),
        )
        return data, warnings
