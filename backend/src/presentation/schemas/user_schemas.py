"""User-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """Request schema for registering a user."""
    
    email: str = Field(..., description="Email address")
    name: str = Field(..., description="Username (3-50 letters, digits, _ or -)")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "taro@example.com",
                    "name": "taro_yamada"
                }
            ]
        }
    }


class UpdateUserRequest(BaseModel):
    """Request schema for a partial user update. Omitted fields stay unchanged."""
    
    email: Optional[str] = Field(None, description="New email address")
    name: Optional[str] = Field(None, description="New username")


class UserResponse(BaseModel):
    """Response schema for a user."""
    
    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)
