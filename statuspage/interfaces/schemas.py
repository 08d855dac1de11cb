"""
Pydantic schemas for the JSON endpoints.

The status pages themselves are HTML; only service metadata is JSON.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
