"""Common response Pydantic schemas."""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Current server time")
    database: str = Field(..., description="Database connection status")


class SignInResponse(BaseModel):
    """Body returned when a sign-in attempt is rejected."""
    message: Optional[str] = Field(None, description="Reason the sign-in failed")


class SessionUser(BaseModel):
    """User stored in the signed session cookie."""
    id: str
    name: str
    email: str
