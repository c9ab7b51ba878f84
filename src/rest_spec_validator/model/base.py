"""Type model data structures.

The type model is the formal description of the API: endpoints, and the
request/interface types that describe what each endpoint accepts.
Loaders and callers build these models; the validator only reads them.
"""

from enum import IntEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Discriminator, Tag


class BodyState(IntEnum):
    """Whether a flattened definition declares a request body."""

    NO_BODY = 0
    YES_BODY = 1


class TypeName(BaseModel):
    """Reference to a type by name."""

    name: str
    namespace: str = ""


class Property(BaseModel):
    """A single declared property. Only the name is inspected."""

    name: str


class Inherits(BaseModel):
    type: TypeName


class FlattenedProperties(BaseModel):
    """Path/query/body contract of a definition after resolving inheritance.

    ``path`` and ``query`` hold each name once, in first-seen order.
    """

    path: list[str] = []
    query: list[str] = []
    body: BodyState = BodyState.NO_BODY

    def merge(self, other: "FlattenedProperties") -> None:
        """Union the path and query names of ``other`` into this one."""
        _extend_unique(self.path, other.path)
        _extend_unique(self.query, other.query)


class Request(BaseModel):
    """A request type: separates path, query and body."""

    kind: Literal["request"] = "request"
    name: TypeName
    path: list[Property] = []
    query: list[Property] = []
    body: dict | None = None  # presence only, content is never inspected
    inherits: list[Inherits] = []

    def declared_properties(self) -> FlattenedProperties:
        props = FlattenedProperties(
            body=BodyState.YES_BODY if self.body is not None else BodyState.NO_BODY,
        )
        _extend_unique(props.path, [p.name for p in self.path])
        _extend_unique(props.query, [p.name for p in self.query])
        return props


class Interface(BaseModel):
    """An interface type: a flat property list, treated as query parameters."""

    kind: Literal["interface"] = "interface"
    name: TypeName
    properties: list[Property] = []
    inherits: list[Inherits] = []

    def declared_properties(self) -> FlattenedProperties:
        props = FlattenedProperties()
        _extend_unique(props.query, [p.name for p in self.properties])
        return props


class OtherType(BaseModel):
    """Any other kind of type (enum, type_alias, ...). Never resolved."""

    kind: str
    name: TypeName


def _type_kind(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("kind")
    else:
        kind = getattr(value, "kind", None)
    return kind if kind in ("request", "interface") else "other"


TypeDefinition = Annotated[
    Union[
        Annotated[Request, Tag("request")],
        Annotated[Interface, Tag("interface")],
        Annotated[OtherType, Tag("other")],
    ],
    Discriminator(_type_kind),
]


class Endpoint(BaseModel):
    """A named API operation, optionally bound to a request type."""

    name: str
    request: TypeName | None = None


class Model(BaseModel):
    """The whole type model: endpoints in declaration order, plus all types."""

    endpoints: list[Endpoint] = []
    types: list[TypeDefinition] = []


def _extend_unique(target: list[str], names: list[str]) -> None:
    for name in names:
        if name not in target:
            target.append(name)
