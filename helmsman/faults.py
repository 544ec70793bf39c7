"""
Helmsman faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every failure a session
  can surface. Codes are grouped by domain to keep logs/searches predictable.
- SessionError: base type carrying a message, a title and a hint; knows how to
  render itself with rich in a friendly, lowercased, and actionable way.
- GenericError / PromptInterruptedError / MalformedEntryError /
  SchemaValidationError: the closed set of failures raised by the interactive layer.
- report(): print any fault to stderr, respecting the colorful/fancy settings.

Propagation
- Prompt failures surface immediately as PromptInterruptedError; nothing is retried.
- Validation failures from click are wrapped once, at the reparse boundary, so
  the tokens the session supplied travel with the original click error.
- GenericError marks a programming/usage problem (malformed schema metadata).
"""
from collections import defaultdict
from enum import IntEnum

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .config import Settings
from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the interactive layer (stable identifiers).

    grouping (by high-level domain)
    - usage (311xx)
      • GENERIC
    - prompting (312xx)
      • PROMPT_INTERRUPTED
      • MALFORMED_ENTRY
    - validation (313xx)
      • SCHEMA_VALIDATION
    """
    # --- usage errors (311xx) ---
    GENERIC                     = 31101

    # --- prompt errors (312xx) ---
    PROMPT_INTERRUPTED          = 31201
    MALFORMED_ENTRY             = 31202

    # --- validation errors (313xx) ---
    SCHEMA_VALIDATION           = 31301

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class SessionError(Exception):
    """
    base class of every failure raised by an interactive session.

    subclasses set `code`, `title` and `hint`; instances carry the message.
    """
    code = FaultCode.GENERIC
    title = "session error"
    hint = None

    def __init__(self, message, /):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

    def __details__(self):
        """
        extra renderables placed between the message and the hint.
        """
        return ()

    def __rich_console__(self, console, options):
        yield self.render()

    def render(self, settings=Unset):
        if settings is Unset:
            settings = Settings.load()
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "detail": "#8A8F9C",
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), styles[style] if settings.colorful else "")

        header = Text.assemble(
            "[ ",
            text(getattr(main, "__prog__", "helmsman"), "prog-name"),
            " — ",
            text(self.code.normalize(), "code"),
            " | ",
            text(self.title.title(), "error-title"),
            " ]"
        )
        body = [text(self.message, "error-message")]
        body.extend(text(detail, "detail") for detail in self.__details__())
        if self.hint:
            body.append(Text.assemble(text(" → ", "hint-arrow"), text(self.hint, "hint")))

        if settings.fancy:
            return Panel(Group(*body), title=header, title_align="left")

        return Group(header, *body)


class GenericError(SessionError):
    code = FaultCode.GENERIC
    title = "malformed schema"
    hint = "fix the command declaration; this is not an input problem"


class PromptInterruptedError(SessionError):
    code = FaultCode.PROMPT_INTERRUPTED
    title = "prompt interrupted"
    hint = "run the session again; partial answers are discarded"

    def __init__(self, label, /):
        self.label = label
        super().__init__(f"input ended while asking {label!r}")


class MalformedEntryError(SessionError):
    code = FaultCode.MALFORMED_ENTRY
    title = "malformed entry"
    hint = "quote values shell-style, e.g. \"it's fine\" second"

    def __init__(self, name, entry, reason, /):
        self.name = name
        self.entry = entry
        super().__init__(f"cannot split the entry {entry!r} for {name!r}: {reason}")


class SchemaValidationError(SessionError):
    code = FaultCode.SCHEMA_VALIDATION
    title = "invalid answers"
    hint = "check the values entered for the arguments named above"

    def __init__(self, tokens, error, /):
        self.tokens = tuple(tokens)
        self.error = error
        formatted = error.format_message() if hasattr(error, "format_message") else str(error)
        super().__init__(f"interactive session supplied these tokens: {list(self.tokens)!r}\n{formatted}")

    def __details__(self):
        return ("tokens: " + " ".join(self.tokens),)


def report(fault, /, *, console=console, settings=Unset):
    """
    print a fault with rich.

    contract
    - fault must be a SessionError; any other exception is a TypeError here so
      unexpected failures are never disguised as session faults.
    """
    if not isinstance(fault, SessionError):
        raise TypeError("report() argument must be a session error")
    console.print(fault.render(settings))


__all__ = (
    "FaultCode",
    "SessionError",
    "GenericError",
    "PromptInterruptedError",
    "MalformedEntryError",
    "SchemaValidationError",
    "report",
)
