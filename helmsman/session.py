"""
Helmsman sessions: prompt for a click command instead of reading argv.

What this module provides
- Session: binds a click command to a prompter and settings.
  • tokens(): walk the command tree and return the equivalent token stream.
  • run(): walk, then reparse with click → ParsedCommand.
  • run_many(): repeat run() while "Add optional entry?" is confirmed.
  • invoke(): walk, then run the command's callbacks with the tokens.
- interactive_parse / interactive_parse_many / interactive_invoke: one-shot helpers.

Quick start
    import click
    from helmsman import interactive_parse

    @click.command()
    @click.argument("path")
    @click.option("--count", type=int)
    def tool(path, count): ...

    result = interactive_parse(tool)
    result["path"], result["count"]

Notes
- Every session builds a fresh token stream; nothing is shared between runs.
- A failure in any single run of run_many() propagates and discards the
  entries collected so far.
"""
import logging

from .arguments import ArgumentEngine
from .commands import walk
from .config import Settings
from .descriptors import describe
from .prompts import Prompter
from .parsing import invoke, reparse
from .utils import Unset

logger = logging.getLogger(__name__)


class Session:
    """
    Interactive construction of one click command.

    Parameters
    - command: click.Command or click.Group to prompt for.
    - prompter: Prompter to ask with; built from console/stream when Unset.
    - console: rich Console used by the default prompter.
    - stream: text stream answers are read from (terminal when Unset).
    - settings: Settings; loaded with Settings.load(**overrides) when Unset.
    - overrides: individual settings (verbose, colorful, fancy).
    """

    def __init__(self, command, /, *, prompter=Unset, console=Unset, stream=Unset, settings=Unset, **overrides):
        if prompter is not Unset and (console is not Unset or stream is not Unset):
            raise TypeError("Session() accepts either a prompter or console/stream, not both")
        if settings is not Unset and overrides:
            raise TypeError("Session() accepts either settings or individual overrides, not both")

        self.command = command
        self.descriptor = describe(command)
        self.prompter = Prompter(console, stream=stream) if prompter is Unset else prompter
        self.settings = Settings.load(**overrides) if settings is Unset else settings
        self.engine = ArgumentEngine(self.prompter, verbose=self.settings.verbose)

    def tokens(self):
        return walk(self.descriptor, self.engine)

    def run(self):
        return reparse(self.command, self.tokens())

    def run_many(self):
        entries = []
        while self.prompter.confirm("Add optional entry?", self.descriptor.name):
            entries.append(self.run())
            logger.debug("collected entry %d for %r", len(entries), self.descriptor.name)
        return entries

    def invoke(self):
        return invoke(self.command, self.tokens())


def interactive_parse(command, /, **options):
    """
    Prompt for `command` and return the click-parsed ParsedCommand.

    Options are forwarded to Session (prompter, console, stream, settings, verbose, ...).
    """
    return Session(command, **options).run()


def interactive_parse_many(command, /, **options):
    """
    Collect zero or more ParsedCommand entries for `command`.
    """
    return Session(command, **options).run_many()


def interactive_invoke(command, /, **options):
    """
    Prompt for `command`, then run it with the collected tokens.
    """
    return Session(command, **options).invoke()


__all__ = (
    "Session",
    "interactive_parse",
    "interactive_parse_many",
    "interactive_invoke",
)
