from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class FactCheckRequest(BaseModel):
    """text fact-check request; `content` is validated by the endpoint"""
    content: Optional[str] = Field(None, description="Claim text to fact-check")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"content": "the moon landing was faked"}
        }
    )


class ErrorResponse(BaseModel):
    """body of every non-2xx response"""
    error: str = Field(..., description="Human-readable error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": "Content is required."}
        }
    )
