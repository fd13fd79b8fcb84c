#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import signal
import sys
import click
from typing import Optional, Sequence

from crowns_cli import __version__
from crowns_cli.agents import spoof_ua
from crowns_cli.client import CrownsError, HttpClient
from crowns_cli.display import Logger, error_panel
from crowns_cli.runner import run_crowns
from crowns_cli.utils import METHODS, RunConfig, parse_header


def _check_headers(ctx, param, value: Sequence[str]):
    for raw in value:
        try:
            parse_header(raw)
        except ValueError as e:
            raise click.BadParameter(f"{str(e)} Got: {raw!r}", ctx=ctx, param=param)
    return value


# ========== CLI with Click ==========

@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--url", "-u", required=True, help="Request URL")
@click.option("--method", "-m", type=click.Choice(METHODS, case_sensitive=False), default="GET",
              help="Request method")
@click.option("--user_agent", "-U", default=None, help="User agent")
@click.option("--data", "-d", default="{}", help="Request data")
@click.option("--silent", "-s", is_flag=True, help="Don't print response body")
@click.option("--verbose", "-v", is_flag=True, help="Make program more verbose")
@click.option("--noprefix", "-r", is_flag=True, help="Remove prefix from verbose/debug logs")
@click.option("--crowns", "-c", type=click.IntRange(min=1), default=1, help="How many crowns to perform")
@click.option("--timeout", "-t", type=click.IntRange(min=0), default=0, help="Timeout between requests in seconds")
@click.option("--header", "-H", multiple=True, callback=_check_headers, help="Add header to request")
@click.version_option(__version__, prog_name="crowns")
def cli(url: str, method: str, user_agent: Optional[str], data: str, silent: bool, verbose: bool,
        noprefix: bool, crowns: int, timeout: int, header: Sequence[str]):
    """
    crowns: send the same HTTP request one or more times.
    """
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    cfg = RunConfig.init_from_options(
            url=url, method=method, user_agent=user_agent, data=data,
            crowns=crowns, timeout=timeout, headers=header,
            verbose=verbose, silent=silent, noprefix=noprefix,
            default_user_agent=spoof_ua(),
    )
    log = Logger(cfg.verbose, prefix=not cfg.noprefix)
    try:
        with HttpClient(cfg.user_agent, cfg.headers) as http:
            run_crowns(cfg, http.send, log)
    except CrownsError as e:
        error_panel(type(e).__name__, str(e))
        sys.exit(1)


def main():
    cli(prog_name="crowns")


if __name__ == "__main__":
    main()
