import logging
import os

import click
from rich.logging import RichHandler
from rich.pretty import pprint

from helmsman import *


@click.group(invoke_without_command=True, subcommand_metavar="my_subcommand")
@click.option("--my_arg", help="MyArg help string")
def git(my_arg):
    """Other heading"""


@git.command()
@click.argument("message", required=False)
def commit(message):
    """Record changes."""


@git.command()
@click.argument("address", type=Delimited(","))
@click.option("--squash", is_flag=True, help="Squash commits")
def merge(address, squash):
    """Join histories."""


if __name__ == '__main__':
    if os.environ.get("HELMSMAN_VERBOSE"):
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler()])
    try:
        pprint(interactive_parse_many(git))
    except SessionError as fault:
        report(fault)
