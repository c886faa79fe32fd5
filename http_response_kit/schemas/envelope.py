"""Pydantic models for the nested parts of response envelopes."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ErrorObject(BaseModel):
    """Canonical ``error`` payload inside an error envelope."""

    type: str
    title: str
    message: str
    details: str | None = None
    stack: str | None = None


class PaginationInput(BaseModel):
    """Pagination parameters supplied by the caller."""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int | None = Field(default=None, alias="totalPages")


class PaginationMeta(BaseModel):
    """Computed pagination block placed under ``metadata.pagination``."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool
