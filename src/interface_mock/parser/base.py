"""Structural type model shared by the interface parser and the mock generator.

The parser turns interface text into these models; the generator walks them
to produce mock values. Serialized names (``type``, ``isArray``,
``isOptional``, ``stringFormat``) follow the JSON shape used by API clients.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TypeKind = Literal["string", "number", "boolean", "date", "object"]
StringFormat = Literal["email", "url", "phone", "name", "address", "company", "uuid"]


class TypeInfo(BaseModel):
    """The shape of a single field."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: TypeKind = Field(alias="type")
    is_array: bool = Field(default=False, alias="isArray")
    is_optional: bool = Field(default=False, alias="isOptional")
    string_format: StringFormat | None = Field(default=None, alias="stringFormat")
    properties: dict[str, "TypeInfo"] | None = None  # only for kind == "object"


class ParsedInterface(BaseModel):
    """Parse result for one interface block."""

    model_config = ConfigDict(frozen=True)

    name: str
    properties: dict[str, TypeInfo] = {}


TypeInfo.model_rebuild()
