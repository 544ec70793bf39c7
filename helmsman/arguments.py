r"""
Helmsman argument prompt engine.

Overview
- ArgumentEngine.prompt(argument) classifies a descriptor and runs one of:
  • required(argument): ask for the value, always yields tokens.
  • optional(argument): confirm "Add optional value?" first; declining yields [].
  • repeated(argument): keep adding optional entries until the user declines.

Token forms (the same spelling click accepts on a real command line)
- positional            → ["value"]
- long option           → ["--name=value"]
- short-only option     → ["-n", "value"]      (short forms cannot carry "=value")
- fixed arity (nargs>1) → the entry is split shell-style into nargs values,
                          preceded by the option spelling when flagged
                          (unbalanced quotes raise MalformedEntryError)
- switch (flag/counter) → ["--name"]           (no text prompt)

Repeated entries
- A required repeatable argument takes its first entry without confirmation.
- With a declared delimiter every entered value is joined into one entry
  ("x", "y" → "x,y"), then formatted once.
- Without a delimiter each entry keeps its own tokens, in encounter order.

Help text
- verbose off: the descriptor's help text (if any).
- verbose on : "<typehint>: help", or just "<typehint>" when there is no help.
"""
import logging
import shlex

from .faults import MalformedEntryError
from .strategies import Strategy, classify
from .utils import Unset, isshort

logger = logging.getLogger(__name__)


def _split(argument, value):
    try:
        return shlex.split(value)
    except ValueError as error:
        raise MalformedEntryError(argument.name, value, str(error).lower()) from error


def _tokens(argument, value, /):
    """
    Format one entry of `argument` into command-line tokens.

    `value` is None for switches, the entered text otherwise.
    """
    if argument.switch:
        return [argument.flag]
    values = [value] if argument.nargs == 1 else _split(argument, value)
    if argument.positional:
        return values
    if argument.nargs == 1 and not isshort(argument.flag):
        return [f"{argument.flag}={value}"]
    return [argument.flag, *values]


class ArgumentEngine:
    def __init__(self, prompter, /, *, verbose=False):
        self.prompter = prompter
        self.verbose = verbose

    def help(self, argument, /):
        if not self.verbose:
            return argument.help
        if argument.help:
            return f"{argument.typehint}: {argument.help}"
        return argument.typehint

    def _value(self, argument):
        # Switches carry no payload; their presence is the value.
        if argument.switch:
            return None
        return self.prompter.text(
            argument.name,
            self.help(argument),
            choices=argument.choices,
            password=argument.secret,
        )

    def _optional_value(self, argument):
        if not self.prompter.confirm("Add optional value?", argument.name):
            return Unset
        return self._value(argument)

    def required(self, argument, /):
        return _tokens(argument, self._value(argument))

    def optional(self, argument, /):
        if (value := self._optional_value(argument)) is Unset:
            return []
        return _tokens(argument, value)

    def repeated(self, argument, /):
        """
        Collect entries until the user declines another one.

        A required argument gets its first entry unconditionally, so click never
        sees it missing; only the entries after it are confirmed. Optional
        arguments confirm before every entry, the first one included.
        """
        values = [self._value(argument)] if argument.required else []
        while (value := self._optional_value(argument)) is not Unset:
            values.append(value)

        if argument.delimiter is not None and values:
            return _tokens(argument, argument.delimiter.join(values))
        return [token for value in values for token in _tokens(argument, value)]

    def prompt(self, argument, /):
        """
        Run the strategy `classify(argument)` selects and return the produced tokens.
        """
        strategy = classify(argument)
        match strategy:
            case Strategy.REPEATED:
                tokens = self.repeated(argument)
            case Strategy.REQUIRED:
                tokens = self.required(argument)
            case Strategy.OPTIONAL:
                tokens = self.optional(argument)
        logger.debug("argument %r (%s) → %r", argument.name, strategy.value, tokens)
        return tokens


__all__ = (
    "ArgumentEngine",
)
