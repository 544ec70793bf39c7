"""
Shared click schemas and a scripted prompter for the test suites.

git
- optional subcommand (invoke_without_command) labelled "my_subcommand"
- --my_arg: optional string converted to a pair by its callback
- commit MESSAGE?   clone ADDRESS...   merge ADDRESS[,ADDRESS...] [--squash]

remote
- required subcommand: add NAME | prune
"""
import io

import click
from rich.console import Console

from helmsman import Delimited, Prompter


def pair(ctx, param, value):
    return None if value is None else tuple(value.split(",", 1))


@click.group(invoke_without_command=True, subcommand_metavar="my_subcommand")
@click.option("--my_arg", callback=pair, help="MyArg help string")
def git(my_arg):
    """Other heading"""


@git.command()
@click.argument("message", required=False)
def commit(message):
    """Record changes."""
    return "commit", message


@git.command()
@click.argument("address", nargs=-1)
def clone(address):
    """Copy a repository."""
    return "clone", address


@git.command()
@click.argument("address", type=Delimited(","), required=True)
@click.option("--squash", is_flag=True, help="Squash commits")
def merge(address, squash):
    """Join histories."""
    return "merge", address, squash


@click.group()
def remote():
    pass


@remote.command()
@click.argument("name")
def add(name):
    pass


@remote.command()
def prune():
    pass


def scripted(*answers):
    """
    Build a Prompter that reads `answers` (one per line) and prints into a buffer.
    """
    console = Console(file=io.StringIO(), width=120)
    return Prompter(console, stream=io.StringIO("".join(f"{answer}\n" for answer in answers)))
