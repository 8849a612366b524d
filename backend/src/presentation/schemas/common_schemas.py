"""Shared Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0"
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""
    
    error: str = Field(..., description="Error kind: validation_error, not_found, internal_error")
    message: str = Field(..., description="Human readable description")
    request_id: Optional[str] = Field(None, description="Correlation id of the failed request")
