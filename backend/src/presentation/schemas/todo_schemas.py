"""Todo-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CreateTodoRequest(BaseModel):
    """Request schema for creating a todo."""
    
    user_id: str = Field(..., description="Owning user identifier")
    title: str = Field(..., description="Todo title (1-200 characters)")
    body: Optional[str] = Field(None, description="Optional body (up to 1000 characters)")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "018e8c6a-4e5f-7b9d-8c2a-3f1e4d5c6b7a",
                    "title": "Buy milk",
                    "body": "Two bottles"
                }
            ]
        }
    }


class UpdateTodoRequest(BaseModel):
    """Request schema for a partial todo update. Omitted fields stay unchanged."""
    
    title: Optional[str] = Field(None, description="New title")
    body: Optional[str] = Field(None, description="New body; an empty string clears it")
    status: Optional[str] = Field(
        None,
        description="NOT_STARTED, IN_PROGRESS, PENDING or COMPLETED"
    )


class TodoResponse(BaseModel):
    """Response schema for a todo."""
    
    id: str
    user_id: str
    title: str
    body: str
    status: str
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)
