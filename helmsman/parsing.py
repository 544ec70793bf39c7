"""
Hand a token stream back to click and return what it made of it.

What this module provides
- ParsedCommand: the typed result of a session, one node per command level
  (name, click-converted params, nested subcommand).
- reparse(command, tokens): parse the stream with click's own parser, level
  by level, without running any command callback.
- invoke(command, tokens): run the command exactly as if the tokens had been
  typed (callbacks included) and return what the command returns.

Failure
- Any click.ClickException is wrapped into SchemaValidationError together with
  the full token stream, so callers can see exactly what was "typed".
- This layer never validates or coerces anything itself.
"""
import logging
from types import MappingProxyType

import click

from .faults import SchemaValidationError

logger = logging.getLogger(__name__)


class ParsedCommand:
    """
    One level of a parsed command line.

    Attributes
    - name: the command name as invoked.
    - params: read-only mapping of parameter name → converted value.
    - subcommand: ParsedCommand of the chosen child, or None.
    """
    __slots__ = ("_name", "_params", "_subcommand")

    def __init__(self, name, params, subcommand=None, /):
        self._name = name
        self._params = MappingProxyType(dict(params))
        self._subcommand = subcommand

    @property
    def name(self):
        return self._name

    @property
    def params(self):
        return self._params

    @property
    def subcommand(self):
        return self._subcommand

    @property
    def path(self):
        """
        Names from this command down to the deepest chosen subcommand.
        """
        node, names = self, []
        while node is not None:
            names.append(node.name)
            node = node.subcommand
        return tuple(names)

    @property
    def leaf(self):
        node = self
        while node.subcommand is not None:
            node = node.subcommand
        return node

    def __getitem__(self, name):
        return self._params[name]

    def __eq__(self, other):
        if not isinstance(other, ParsedCommand):
            return NotImplemented
        return (self.name, dict(self.params), self.subcommand) == (other.name, dict(other.params), other.subcommand)

    __hash__ = None

    def __rich_repr__(self):
        yield "name", self.name
        yield "params", dict(self.params)
        yield "subcommand", self.subcommand

    def __repr__(self):
        return f"ParsedCommand(name={self.name!r}, params={dict(self.params)!r}, subcommand={self.subcommand!r})"


def _parse(command, name, args, parent):
    # Mirrors click.Command.make_context, keeping the leftover tokens of groups.
    extra = dict(command.context_settings)
    ctx = command.context_class(command, info_name=name, parent=parent, **extra)
    if isinstance(command, click.Group) and not args and not command.invoke_without_command:
        ctx.fail("Missing command.")
    with ctx.scope(cleanup=False):
        rest = click.Command.parse_args(command, ctx, list(args))

    subcommand = None
    if isinstance(command, click.Group):
        if rest:
            child_name, child, child_args = command.resolve_command(ctx, rest)
            subcommand = _parse(child, child_name, child_args, ctx)
        elif not command.invoke_without_command:
            ctx.fail("Missing command.")

    return ParsedCommand(name, ctx.params, subcommand)


def reparse(command, tokens, /):
    """
    Parse a finalized token stream with click.

    Parameters
    - command: the click command the tokens were built from.
    - tokens: sequence of strings; tokens[0] is the program/command name.

    Returns
    - ParsedCommand tree matching the path taken through the command tree.

    Raises
    - SchemaValidationError: when click rejects the tokens.
    """
    name, *args = tokens
    try:
        result = _parse(command, name, args, None)
    except click.ClickException as error:
        logger.debug("click rejected %r: %s", tokens, error.format_message())
        raise SchemaValidationError(tokens, error) from error
    logger.debug("click accepted %r", tokens)
    return result


def invoke(command, tokens, /):
    """
    Run `command` with a finalized token stream and return the callback result.

    Raises
    - SchemaValidationError: when click rejects the tokens.
    """
    name, *args = tokens
    try:
        return command.main(args=args, prog_name=name, standalone_mode=False)
    except click.ClickException as error:
        raise SchemaValidationError(tokens, error) from error


__all__ = (
    "ParsedCommand",
    "reparse",
    "invoke",
)
