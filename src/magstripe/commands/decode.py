"""Command: decode magnetic stripe service codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from magstripe.commands._base import MagCommand

if TYPE_CHECKING:
    from magstripe.commands._context import AppContext


@click.command(
    cls=MagCommand,
    examples="""\
  magstripe decode 201
  magstripe decode 101 220 999
  magstripe --json decode 201
  magstripe decode --strict 2011
  cat codes.txt | magstripe -q decode""",
)
@click.argument("codes", nargs=-1)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Fail on over-length codes or undecodable positions.",
)
@click.option(
    "--keep-raw",
    is_flag=True,
    help="Keep raw input after decoding. Raw input is never printed; "
    "only the has_raw_data field changes.",
)
@click.pass_obj
def decode(app: AppContext, codes: tuple[str, ...], strict: bool | None, keep_raw: bool) -> None:
    """Decode service codes given as arguments, or one per line on stdin."""
    from magstripe.services.decode import DecodeService

    if not codes:
        stdin = click.get_text_stream("stdin")
        codes = tuple(line.rstrip("\r\n") for line in stdin if line.strip())

    overrides: dict[str, bool] = {}
    if strict is not None:
        overrides["strict"] = strict
    if keep_raw:
        overrides["clear_raw_data"] = False
    settings = app.settings
    if overrides:
        settings = settings.model_copy(
            update={"decode": settings.decode.model_copy(update=overrides)}
        )

    svc = DecodeService(settings)
    if len(codes) == 1:
        app.emit(svc.decode(codes[0]))
    else:
        app.emit(svc.decode_many(codes))
