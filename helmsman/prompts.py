"""
Prompt primitives backed by rich.prompt.

Prompter exposes the three questions a session ever asks:
- text(label, help)            → str           (rich.prompt.Prompt)
- confirm(label, help)         → bool          (rich.prompt.Confirm)
- select(label, options)       → chosen name   (rich.prompt.Prompt with choices)

Input source
- By default answers are read from the terminal.
- A text stream (anything with readline()) may be supplied instead; this is how
  scripted sessions and tests drive the prompts. End of the stream behaves like
  end of terminal input.

Failure
- End of input and keyboard interrupts surface as PromptInterruptedError,
  chained to the original exception. Nothing is retried.
"""
from rich.box import ROUNDED
from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from .faults import GenericError, PromptInterruptedError
from .utils import Unset


class _Reader:
    """
    readline() adapter raising EOFError once the wrapped stream is exhausted.

    rich reads scripted answers with stream.readline(); an exhausted stream
    returns "" which Confirm would reject forever.
    """

    def __init__(self, stream, /):
        self._stream = stream

    def readline(self):
        if not (line := self._stream.readline()):
            raise EOFError
        return line


class _Verbatim(Prompt):
    """
    Free-text prompt that keeps surrounding whitespace; only the line ending goes.
    """

    def process_response(self, value):
        return value.rstrip("\r\n")


class Prompter:
    def __init__(self, console=Unset, /, *, stream=Unset):
        self.console = Console() if console is Unset else console
        self._stream = _Reader(stream) if stream is not Unset else None

    @staticmethod
    def _label(label, help):
        if not help:
            return Text(label, style="bold")
        return Text.assemble((label, "bold"), " ", (f"({help})", "dim"))

    def _ask(self, kind, label, help, /, **options):
        try:
            return kind.ask(self._label(label, help), console=self.console, stream=self._stream, **options)
        except (EOFError, KeyboardInterrupt) as error:
            raise PromptInterruptedError(label) from error

    def text(self, label, help=None, /, *, choices=None, password=False):
        """
        Ask for free text. Without choices the answer is returned as typed,
        surrounding whitespace included.

        Parameters
        - choices: restrict the answer to these strings (shown inline).
        - password: hide the input; ignored for scripted streams, which are
          read line by line.
        """
        password = password and self._stream is None
        if choices:
            return self._ask(Prompt, label, help, password=password, choices=list(choices))
        return self._ask(_Verbatim, label, help, password=password)

    def confirm(self, label, help=None, /):
        return self._ask(Confirm, label, help)

    def select(self, label, options, /):
        """
        Ask for one entry of `options` (a mapping of name → short help or None).

        A table of the options is printed first when any of them has help text.
        """
        options = dict(options)
        if not options:
            raise GenericError(f"nothing to select for {label!r}")

        if any(options.values()):
            table = Table(box=ROUNDED, show_header=False)
            table.add_column(style="bold")
            table.add_column(style="dim")
            for name, help in options.items():
                table.add_row(name, help or "")
            self.console.print(table)

        return self._ask(Prompt, label, None, choices=list(options))


__all__ = (
    "Prompter",
)
