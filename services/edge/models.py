"""Edge Service — request/response models."""

from pydantic import BaseModel
from typing import Optional


class ChatRequest(BaseModel):
    message: str
    systemPrompt: Optional[str] = None


class ChatResponse(BaseModel):
    response: str
    reasoning: Optional[str] = None
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
