"""Page-builder preview schema."""

from typing import Any

from pydantic import BaseModel, Field


class PreviewRequest(BaseModel):
    """Request body for POST /preview.

    blocks are kept as raw JSON: malformed entries still render (as a
    placeholder) so the editor shows them instead of failing the preview.
    """

    blocks: list[Any] = Field(..., description="Page-builder block list")
    editable: bool = Field(default=False, description="Add data-block-id attributes")
    title: str = Field(default="Store Preview", max_length=255)
