import json
import logging

import click

from . import __version__
from .config import load_config
from .error import CanonreqError, ConfigError
from .helper import format_headers, parse_header_line, shorten_text
from .logger import config_logging
from .request import Request

LOG = logging.getLogger(__name__)


@click.group()
def cli():
    """Canonreq CLI"""


@cli.command()
def version():
    """Show CLI version"""
    click.echo(__version__)


def _format_request(request, width):
    lines = [f"{request.method} {request.uri_with_query}"]
    if request.headers:
        lines.append(format_headers(request.headers))
    if request.body:
        text = request.body.decode("utf-8", "backslashreplace")
        lines.append("")
        lines.append(shorten_text(text, width=width))
    return "\n".join(lines)


@cli.command()
@click.argument("method")
@click.argument("uri")
@click.option("--header", "-H", "headers", multiple=True,
              help="Request header, eg: 'Content-Type: application/json'")
@click.option("--data", "-d", type=str, default=None, help="Request body text")
@click.option("--data-file", type=click.File("rb"), default=None,
              help="Read request body from file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def inspect(ctx, method, uri, headers, data, data_file, as_json, debug):
    """Build a canonical request and show it"""
    overrides = {}
    if debug:
        overrides["debug"] = True
    try:
        config = load_config(**overrides)
    except ConfigError as ex:
        ctx.fail(f"config error: {ex}")
    config_logging(config)
    if data is not None and data_file is not None:
        ctx.fail("--data and --data-file can not be used together")
    builder = Request.builder()
    try:
        builder.set_method(method)
        builder.set_uri_with_query(uri)
        for line in headers:
            try:
                name, value = parse_header_line(line)
            except ValueError as ex:
                ctx.fail(str(ex))
            builder.add_header(name, value)
        if data is not None:
            builder.set_body(data.encode("utf-8"))
        elif data_file is not None:
            builder.set_body(data_file.read())
        request = builder.build()
    except CanonreqError as ex:
        ctx.fail(str(ex))
    LOG.debug("Inspecting %r", request)
    if as_json:
        click.echo(json.dumps(request.to_dict(), ensure_ascii=False, indent=4))
    else:
        click.echo(_format_request(request, config.preview_width))


if __name__ == "__main__":
    cli()
