"""Storable base model: the codec contract every stored object implements."""

from __future__ import annotations

from typing import ClassVar, Self
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from ..serializers.json import object_from_json, object_to_document, object_to_json


class Storable(BaseModel):
    """Typed object addressed by ``(kind, id)``.

    Subclasses set ``kind`` to name their collection. Encoding and decoding
    go through pydantic's JSON mode so that a saved object decodes to an
    equal one. Override ``to_json``/``from_json`` for a custom wire format.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    kind: ClassVar[str] = ""

    id: str = Field(default_factory=lambda: uuid4().hex)

    def to_json(self) -> str:
        return object_to_json(self)

    @classmethod
    def from_json(cls, payload: str | bytes) -> Self:
        return object_from_json(cls, payload)

    def to_document(self) -> dict[str, object]:
        return object_to_document(self)


class Record(Storable):
    """Schemaless storable. Unknown fields are kept and queryable."""

    model_config = ConfigDict(strict=True, extra="allow")


def record_type(kind: str) -> type[Record]:
    """Build a ``Record`` subclass bound to ``kind`` at runtime."""
    name = "".join(part.capitalize() for part in kind.replace("-", "_").split("_")) or "Anonymous"
    return type(f"{name}Record", (Record,), {"kind": kind, "__module__": __name__})
