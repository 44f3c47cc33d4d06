# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click
from click_help_colors import HelpColorsGroup

from qsge_lib.header.cli import header
from qsge_lib.jobid.cli import jobid
from qsge_lib.kill.cli import kill
from qsge_lib.stat.cli import stat
from qsge_lib.submit.cli import submit

__version__ = "0.1.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=HelpColorsGroup,
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of qsge and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Run any qsge command.

    qsge translates job resources into Sun/Oracle/Open Grid Engine submissions
    and decodes the output of the SGE commands. It never runs qsub, qstat, or qdel itself.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(header)
cli.add_command(submit)
cli.add_command(jobid)
cli.add_command(stat)
cli.add_command(kill)
