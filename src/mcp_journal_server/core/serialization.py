"""JSON payloads for journal lines."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from .models import Line, Parameter, ParameterizedLine, RawLine


class ParameterPayload(BaseModel):
    value: str = Field(description="Parameter text, quotes included for strings.")
    prefix: str = Field(default="", description="Separator space kept from the source.")
    comment: str = Field(default="", description="Body of a trailing /*...*/ annotation.")


class ParameterizedLinePayload(BaseModel):
    type: Literal["parameterized"] = "parameterized"
    prefix: str = Field(default="", description="Timestamp text without the /* */ wrapper.")
    module: str = Field(description="Module name, e.g. JrnCmd.")
    action: str = Field(description="Action name, e.g. MouseMove.")
    parameters: list[ParameterPayload] = Field(default_factory=list)
    suffix: str = Field(default="", description="Text after the closing paren, usually ';'.")


class RawLinePayload(BaseModel):
    type: Literal["raw"] = "raw"
    content: str = Field(description="Line text, stored verbatim.")


LinePayload = Annotated[
    Union[ParameterizedLinePayload, RawLinePayload],
    Field(discriminator="type"),
]

_LINE_ADAPTER: TypeAdapter[Any] = TypeAdapter(LinePayload)


def line_payload_schema() -> dict[str, Any]:
    """Return the JSON schema accepted by line_from_dict."""
    return _LINE_ADAPTER.json_schema()


def line_to_dict(line: Line, *, line_no: int | None = None) -> dict[str, Any]:
    """Convert a Line into a JSON-serializable dict."""
    d: dict[str, Any]
    if isinstance(line, ParameterizedLine):
        d = {
            "type": "parameterized",
            "prefix": line.prefix,
            "module": line.module,
            "action": line.action,
            "parameters": [
                {"value": p.value, "prefix": p.prefix, "comment": p.comment}
                for p in line.parameters
            ],
            "suffix": line.suffix,
        }
    else:
        d = {"type": "raw", "content": line.content}

    d["literal"] = line.literal()
    if line_no is not None:
        d["line_no"] = line_no
    return d


def line_from_dict(data: dict[str, Any]) -> Line:
    """Validate a payload dict and build the matching Line.

    Raises pydantic.ValidationError on malformed payloads.
    """
    payload = _LINE_ADAPTER.validate_python(data)
    if isinstance(payload, RawLinePayload):
        return RawLine(payload.content)
    return ParameterizedLine(
        module=payload.module,
        action=payload.action,
        parameters=[
            Parameter(value=p.value, prefix=p.prefix, comment=p.comment)
            for p in payload.parameters
        ],
        prefix=payload.prefix,
        suffix=payload.suffix,
    )
