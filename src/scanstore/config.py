"""Configuration for an OrderedStorage instance."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

BackendName = Literal["sqlite", "memory"]


class StorageConfig(BaseModel):
    """Validated storage configuration. Passed via DI at construction."""

    dir: Path = Path("./data")
    backend: BackendName = "sqlite"
    filename: str = "store.sqlite3"
    separator: str = ":"
    scan_batch_size: int = Field(default=256, gt=0)

    @field_validator("separator")
    @classmethod
    def _non_empty_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("separator must not be empty")
        return value

    @property
    def path(self) -> Path:
        return self.dir / self.filename
