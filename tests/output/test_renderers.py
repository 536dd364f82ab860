"""Tests for Rich renderers."""

from magstripe.domain.service_code import ServiceCode
from magstripe.output.console import create_console, get_output
from magstripe.output.renderers import render_result
from magstripe.services.result import ServiceError, ServiceResult


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True, width=40)
        console.print("hello")
        assert get_output(console) == "hello\n"


class TestRenderServiceCode:
    def test_unknown_positions_show_dash(self) -> None:
        data = ServiceCode("2").describe()
        output = render_result(ServiceResult(ok=True, op="decode_service_code", data=data))
        assert "UNKNOWN" in output
        assert "-" in output

    def test_empty_code_placeholder(self) -> None:
        data = ServiceCode().describe()
        output = render_result(ServiceResult(ok=True, op="decode_service_code", data=data))
        assert "(none)" in output

    def test_over_length_marker(self) -> None:
        data = ServiceCode("2011").describe()
        data["exceeds_maximum_length"] = True
        output = render_result(ServiceResult(ok=True, op="decode_service_code", data=data))
        assert "exceeds maximum length" in output

    def test_many_codes(self) -> None:
        items = [ServiceCode("201").describe(), ServiceCode("999").describe()]
        result = ServiceResult(ok=True, op="decode_service_codes", data={"items": items})
        output = render_result(result)
        assert "201" in output
        assert "999" in output
        assert "TEST" in output


class TestRenderGeneric:
    def test_unknown_op_lists_fields(self) -> None:
        result = ServiceResult(ok=True, op="custom", data={"answer": 42})
        output = render_result(result)
        assert "answer: 42" in output

    def test_verbose_shows_meta(self) -> None:
        result = ServiceResult(ok=True, op="custom", meta={"invalid_count": 1})
        assert "invalid_count: 1" in render_result(result, verbose=True)
        assert "invalid_count" not in render_result(result)

    def test_error_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="decode_service_code",
            error=ServiceError(
                code="INVALID_SERVICE_CODE",
                message="not valid",
                detail={"reasons": ["Position 3 could not be decoded"]},
            ),
        )
        output = render_result(result)
        assert "ERROR" in output
        assert "reasons" in output
