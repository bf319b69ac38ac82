"""
Completion Models
"""
from pydantic import BaseModel
from typing import Optional


class GenerateRequest(BaseModel):
    """Request for a raw completion"""
    prompt: Optional[str] = None


class GenerateResponse(BaseModel):
    """Raw completion text"""
    response: str
