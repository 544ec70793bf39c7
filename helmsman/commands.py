"""
Helmsman command walker: turn a descriptor tree into a token stream.

State machine (one linear path per session, no backtracking)
- COLLECTING(command):  prompt every argument in declaration order.
- CHOOSING(command):    pick one direct child by name.
- DESCENDING(child):    append the child's name, then collect its arguments.
- TERMINAL:             stop; the token stream is final.

Transitions after COLLECTING
- no children                         → TERMINAL
- subcommand required                 → CHOOSING (no confirmation)
- subcommand optional, "yes" answered → CHOOSING
- subcommand optional, "no" answered  → TERMINAL

Guarantees
- The stream starts with the root name, followed by a strict left-to-right
  concatenation of per-level argument tokens and subcommand names.
- A subcommand name is appended only after all of its parent's arguments.
- A level whose positional value starts with "-" emits its options, then "--",
  then its positional values.
- Every descent consumes a child; the tree is finite, so the walk terminates.
"""
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class State(Enum):
    COLLECTING = "collecting"
    CHOOSING = "choosing"
    DESCENDING = "descending"
    TERMINAL = "terminal"


def _descend(command, prompter):
    """
    Decide whether to leave `command` for one of its children.

    Returns the chosen child descriptor, or None to stop.
    """
    if not command.children:
        return None
    if not command.subcommand_required and not prompter.confirm("Add optional command?", command.metavar):
        return None
    logger.debug("%s %r", State.CHOOSING.value, command.name)
    name = prompter.select(command.name, {name: child.help for name, child in command.children.items()})
    return command.children[name]


def _dashed(token):
    return token.startswith("-") and token != "-"


def _collect(command, engine):
    """
    Prompt every argument of `command` and return this level's tokens.

    A positional value that looks like an option is only read as a value after
    the "--" separator. When one occurs, option tokens keep their order but move
    ahead of the separator and the positional tokens follow it. Click applies the
    separator to this level alone; a subcommand's tokens parse as usual.
    """
    entries = [(argument.positional, engine.prompt(argument)) for argument in command.arguments]
    if not any(positional and any(map(_dashed, tokens)) for positional, tokens in entries):
        return [token for _, tokens in entries for token in tokens]

    logger.debug("separating positional values of %r with '--'", command.name)
    options = [token for positional, tokens in entries if not positional for token in tokens]
    values = [token for positional, tokens in entries if positional for token in tokens]
    return [*options, "--", *values]


def walk(descriptor, engine, /):
    """
    Prompt through `descriptor` and return the equivalent command-line tokens.

    Parameters
    - descriptor: CommandDescriptor of the root command.
    - engine: ArgumentEngine; its prompter also answers the subcommand questions.

    Returns
    - list[str] beginning with the root command name.
    """
    tokens = [descriptor.name]
    command = descriptor

    while True:
        logger.debug("%s %r", State.COLLECTING.value, command.name)
        tokens.extend(_collect(command, engine))

        if (command := _descend(command, engine.prompter)) is None:
            break

        logger.debug("%s %r", State.DESCENDING.value, command.name)
        tokens.append(command.name)

    logger.debug("%s %r", State.TERMINAL.value, tokens)
    return tokens


__all__ = (
    "State",
    "walk",
)
