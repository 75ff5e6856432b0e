"""Bodies of the 404 and 500 responses."""

from pydantic import BaseModel, Field


class NotFoundMessage(BaseModel):
    message: str = Field(..., description="What could not be found")


class ErrorMessage(BaseModel):
    error: str = Field(..., description="Text of the underlying failure")
