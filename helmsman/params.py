"""
Click parameter types understood by the interactive layer.

Delimited
- A click ParamType that turns one token into a list of converted values by
  splitting on a delimiter ("x,y" -> ["x", "y"]).
- The walker treats any parameter of this type as repeatable: every entry the
  user adds is collected, and all entries are joined with the delimiter into a
  single token before being handed back to click.

Example
    @click.command()
    @click.argument("address", type=Delimited(","))
    def merge(address): ...
"""
import click


class Delimited(click.ParamType):
    name = "delimited"

    def __init__(self, delimiter=",", /, type=click.STRING):
        if not isinstance(delimiter, str):
            raise TypeError("Delimited 'delimiter' must be a string")
        elif not delimiter:
            raise ValueError("Delimited 'delimiter' cannot be empty")
        self.delimiter = delimiter
        self.type = click.types.convert_type(type)

    def convert(self, value, param, ctx):
        # Defaults may already be sequences of converted values.
        if isinstance(value, list | tuple):
            return list(value)
        return [self.type.convert(item, param, ctx) for item in str(value).split(self.delimiter)]

    def get_metavar(self, param, ctx=None):
        inner = self.type.name.upper()
        return f"{inner}[{self.delimiter}{inner}...]"

    def to_info_dict(self):
        info = super().to_info_dict()
        info["delimiter"] = self.delimiter
        info["type"] = self.type.to_info_dict()
        return info

    def __repr__(self):
        return f"Delimited({self.delimiter!r}, {self.type!r})"


__all__ = (
    "Delimited",
)
