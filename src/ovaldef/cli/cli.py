from __future__ import annotations

import logging
import sys

import click

from ovaldef import __name__ as package_name
from ovaldef import parser, report
from ovaldef.cli import config
from ovaldef.errors import OvalError


def _configure_logging(cfg: config.Log, verbose: int) -> None:
    import logging.config

    log_level = cfg.level
    if verbose == 1:
        log_level = "INFO"
    elif verbose == 2:
        log_level = "DEBUG"
    elif verbose >= 3:
        log_level = "TRACE"

    if cfg.slim:
        timestamp_format = ""
        level_format = ""
    else:
        timestamp_format = "%(asctime)s "
        if not cfg.show_timestamp:
            timestamp_format = ""

        level_format = "[%(levelname)-5s] "
        if not cfg.show_level:
            level_format = ""

    log_format = f"%(log_color)s{timestamp_format}{level_format}%(message)s"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "()": "colorlog.ColoredFormatter",
                    "format": log_format,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                    "log_colors": {
                        "TRACE": "purple",
                        "DEBUG": "cyan",
                        "INFO": "reset",
                        "WARNING": "yellow",
                        "ERROR": "red",
                        "CRITICAL": "red,bg_white",
                    },
                },
            },
            "handlers": {
                "default": {
                    "level": log_level,
                    "formatter": "standard",
                    "class": "colorlog.StreamHandler",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "": {  # root logger
                    "handlers": ["default"],
                    "level": log_level,
                },
            },
        },
    )


@click.command(help="Parse an OVAL definitions document and print the resolved criteria of every definition.")
@click.argument("path", metavar="OVAL_FILE")
@click.option("--verbose", "-v", default=0, help="show logs (repeat for more detail)", count=True)
@click.option("--config", "-c", "config_path", default=".ovaldef.yaml", help="override config path")
@click.option(
    "--output",
    "-o",
    type=click.Choice([f.value for f in config.OutputFormat]),
    default=None,
    help="output format",
)
@click.option("--show-index/--hide-index", default=None, help="list tests, states and objects after the definitions")
@click.option("--strict/--no-strict", default=None, help="exit 1 when any definition has unresolved references")
@click.option("--fail-fast/--no-fail-fast", default=None, help="stop at the first unresolved reference")
@click.version_option(package_name=package_name, message="%(prog)s %(version)s")
def cli(  # noqa: PLR0913
    path: str,
    verbose: int,
    config_path: str,
    output: str | None,
    show_index: bool | None,
    strict: bool | None,
    fail_fast: bool | None,
) -> None:
    cfg = config.load(path=config_path)
    _configure_logging(cfg.log, verbose)

    # command line flags win over the config file
    if output is not None:
        cfg.report.output = config.OutputFormat(output)
    if show_index is not None:
        cfg.report.show_index = show_index
    if strict is not None:
        cfg.report.strict = strict
    if fail_fast is not None:
        cfg.report.fail_fast = fail_fast

    logging.debug(f"config: {cfg}")

    try:
        document = parser.parse_file(path)
        result = report.build(document, fail_fast=cfg.report.fail_fast)
    except OSError as e:
        raise click.FileError(path, hint=e.strerror or str(e)) from e
    except OvalError as e:
        logging.error(f"unable to process {path}")
        raise click.ClickException(str(e)) from e

    if cfg.report.output == config.OutputFormat.JSON:
        click.echo(report.render_json(result))
    else:
        click.echo(report.render_text(result, show_index=cfg.report.show_index))

    # ambiguous operators fail the run regardless of --strict
    if result.ambiguous:
        raise click.ClickException("; ".join(str(e) for e in result.ambiguous))

    if cfg.report.strict and result.flagged:
        logging.error(f"{len(result.flagged)} definitions have unresolved references")
        sys.exit(1)
