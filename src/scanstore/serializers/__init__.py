"""Serialization helpers."""

from .json import object_from_json, object_to_document, object_to_json

__all__ = ["object_from_json", "object_to_document", "object_to_json"]
