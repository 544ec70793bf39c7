"""
Helmsman descriptors: a read-only view of a click command tree.

What this module provides
- ArgumentDescriptor: everything the prompt engine needs to know about one
  click parameter (identity, positional vs flagged, required, arity, help).
- CommandDescriptor: one command with its ordered arguments and its children.
- describe(command): build the descriptor tree from a click.Command/Group.

Reading click metadata
- click.Argument  → positional; click.Option → flagged.
- Option.multiple, Option.count, Argument(nargs=-1) and Delimited types are
  repeatable; only Delimited declares a join delimiter.
- Boolean flags and counters are presence-only switches (nargs == 0).
- Group.invoke_without_command=False means a subcommand is required;
  Group.subcommand_metavar labels the subcommand slot.
- Hidden optional parameters, hidden subcommands and parameters that do not
  expose a value (e.g. --version) are never prompted.

Invariants
- Descriptors are immutable and outlive any session built on them.
- describe() raises GenericError for metadata the walker cannot honour, so a
  well-formed tree always yields token streams click can parse.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType

import click

from .faults import GenericError
from .params import Delimited
from .utils import Unset, coalesce, preferred

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ArgumentDescriptor:
    name: str
    positional: bool
    required: bool
    repeatable: bool
    nargs: int = 1
    delimiter: str | None = None
    flag: str | None = None
    help: str | None = None
    typehint: str | None = None
    choices: tuple[str, ...] | None = None
    secret: bool = False

    @property
    def switch(self):
        """
        True for presence-only options (boolean flags, counters).
        """
        return self.nargs == 0


@dataclass(frozen=True, eq=False)
class CommandDescriptor:
    name: str
    arguments: tuple[ArgumentDescriptor, ...] = ()
    children: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))
    subcommand_required: bool = False
    metavar: str | None = None
    help: str | None = None
    source: click.Command | None = None


def typehint(type, /):
    """
    Render a click ParamType as a compact diagnostic hint.

    Examples
    - click.STRING                          → "<text>"
    - click.Tuple([str, str])               → "<text,text>"
    - Delimited(",", int)                   → "<integer,...>"
    """
    if isinstance(type, click.Tuple):
        names = [item.name for item in type.types]
    elif isinstance(type, Delimited):
        names = [type.type.name, "..."]
    else:
        names = [type.name]
    return f"<{','.join(names)}>"


def _prompted(param):
    if not param.expose_value:
        return False
    return param.required or not getattr(param, "hidden", False)


def _choices(type):
    if not isinstance(type, click.Choice):
        return None
    # Enum choices are matched by name on the command line.
    return tuple(getattr(choice, "name", str(choice)) for choice in type.choices)


def _describe_argument(param):
    if not param.name:
        raise GenericError(f"parameter {param!r} has no name")

    positional = isinstance(param, click.Argument)
    switch = isinstance(param, click.Option) and bool(param.is_flag or param.count)
    delimiter = param.type.delimiter if isinstance(param.type, Delimited) else None

    if delimiter is not None and param.nargs != 1:
        raise GenericError(f"parameter {param.name!r} is delimited and must take exactly one value per entry")

    if positional:
        flag = None
    elif switch and param.secondary_opts and param.default is True:
        # --x/--no-x defaulting to true: the entry turns it off.
        flag = preferred(param.secondary_opts)
    else:
        flag = preferred(param.opts)

    help = (getattr(param, "help", None) or "").strip() or None

    return ArgumentDescriptor(
        name=param.name,
        positional=positional,
        required=bool(param.required),
        repeatable=bool(
            getattr(param, "multiple", False)
            or getattr(param, "count", False)
            or param.nargs < 0
            or delimiter is not None
        ),
        nargs=0 if switch else max(param.nargs, 1),
        delimiter=delimiter,
        flag=flag,
        help=help,
        typehint=typehint(param.type),
        choices=_choices(param.type),
        secret=bool(getattr(param, "hide_input", False)),
    )


def describe(command, /, name=Unset):
    """
    Build the descriptor tree of a click command.

    Parameters
    - command: click.Command | click.Group
    - name: override for the command's name (defaults to command.name). Child
      names always come from the group's own listing.

    Returns
    - CommandDescriptor with arguments in declaration order and children in
      the order the group lists them.

    Raises
    - TypeError: when command is not a click command.
    - GenericError: when the command has no name, a group declares a variadic
      or optional positional (either would swallow the subcommand name), or a Delimited
      parameter takes more than one value per entry.
    """
    if not isinstance(command, click.Command):
        raise TypeError("describe() argument must be a click command")
    if not (name := coalesce(name, command.name)):
        raise GenericError(f"command {command!r} has no name")

    arguments = tuple(_describe_argument(param) for param in command.params if _prompted(param))

    children = {}
    required = False
    metavar = None

    if isinstance(command, click.Group):
        for param in command.params:
            if not isinstance(param, click.Argument):
                continue
            if param.nargs < 0:
                raise GenericError(
                    f"group {name!r} declares variadic argument {param.name!r} which would consume its subcommand"
                )
            if not param.required:
                raise GenericError(
                    f"group {name!r} declares optional argument {param.name!r} which would consume its subcommand"
                )

        context = click.Context(command, info_name=name)
        for child_name in command.list_commands(context):
            child = command.get_command(context, child_name)
            if child is None or child.hidden:
                continue
            children[child_name] = describe(child, child_name)

        required = not command.invoke_without_command
        metavar = command.subcommand_metavar

    logger.debug("described %r: %d argument(s), %d subcommand(s)", name, len(arguments), len(children))

    return CommandDescriptor(
        name=name,
        arguments=arguments,
        children=MappingProxyType(children),
        subcommand_required=required,
        metavar=metavar,
        help=command.get_short_help_str() or None,
        source=command,
    )


__all__ = (
    "ArgumentDescriptor",
    "CommandDescriptor",
    "describe",
    "typehint",
)
