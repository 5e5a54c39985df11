"""JSON serialization helpers for storable objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pydantic import ValidationError

from ..exceptions import DecodeError

if TYPE_CHECKING:
    from ..models import Storable

S = TypeVar("S", bound="Storable")


def object_to_json(obj: Storable, *, indent: int | None = None) -> str:
    return obj.model_dump_json(indent=indent)


def object_from_json(cls: type[S], payload: str | bytes) -> S:
    """Parse a JSON payload into an instance of ``cls``.

    Raises ``DecodeError`` on invalid JSON or on a payload that does not
    validate against the model.
    """
    try:
        return cls.model_validate_json(payload)
    except (ValidationError, ValueError) as exc:
        raise DecodeError(f"Failed to decode {cls.kind or cls.__name__} payload: {exc}") from exc


def object_to_document(obj: Storable) -> dict[str, object]:
    """Return the JSON-shaped tree of ``obj`` (nested dicts, lists and scalars)."""
    return obj.model_dump(mode="json")
