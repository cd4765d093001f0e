"""
API interface (DTO) for the usage endpoint.
"""

from pydantic import BaseModel, ConfigDict


class Usage(BaseModel):
    """Usage statistics for the current billing period."""

    model_config = ConfigDict(frozen=True, strict=True)

    screenshots_taken: int
    screenshots_limit: int
    storage_bytes_used: int
    storage_bytes_limit: int
    period_start: str
    period_end: str
