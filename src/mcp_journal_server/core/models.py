"""Core data models for journal scripts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(slots=True)
class Parameter:
    """One call argument, kept as the exact text it was parsed from."""

    value: str
    prefix: str = ""  # "" or the single space that followed the previous comma
    comment: str = ""  # body of a trailing /*...*/ annotation

    def literal(self) -> str:
        """Return the source text of this parameter."""
        comment = f"/*{self.comment}*/" if self.comment else ""
        return f"{self.prefix}{self.value}{comment}"


@dataclass(slots=True)
class ParameterizedLine:
    """A `module.action(params)suffix` call, optionally timestamped."""

    module: str
    action: str
    parameters: list[Parameter] = field(default_factory=list)
    prefix: str = ""  # timestamp text without the /* */ wrapper
    suffix: str = ""  # everything after the closing paren, usually ";"

    def is_valid(self) -> bool:
        # Reserved for semantic validation of module/action names.
        return False

    def is_empty(self) -> bool:
        return not self.prefix and not self.module and not self.action and not self.parameters

    def literal(self, param_sep: str = ",") -> str:
        """Rebuild the line text; unmodified lines reproduce their source."""
        head = f"/*{self.prefix}*/ " if self.prefix else ""
        params = param_sep.join(p.literal() for p in self.parameters)
        return f"{head}{self.module}.{self.action}({params}){self.suffix}"

    def clear(self) -> None:
        self.prefix = ""
        self.module = ""
        self.action = ""
        self.parameters = []
        self.suffix = ""


@dataclass(slots=True)
class RawLine:
    """Blank, comment or unrecognized line, stored verbatim."""

    content: str

    def is_valid(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return not self.content

    def literal(self) -> str:
        return self.content

    def clear(self) -> None:
        self.content = ""


Line: TypeAlias = ParameterizedLine | RawLine
