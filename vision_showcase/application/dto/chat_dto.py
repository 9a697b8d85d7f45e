from typing import Optional, List, Dict, Any
from pydantic import ConfigDict, Field

from .base import CamelModel


class ChatMessageRequest(CamelModel):
    """Request model for chat message"""
    message: str = Field(min_length=1)


class ChatMessageSchema(CamelModel):
    id: str
    role: str
    content: str
    timestamp: int
    metadata: Optional[Dict[str, Any]] = None


class ChatExchangeResponse(CamelModel):
    """The stored user message and the assistant's reply"""
    user_message: ChatMessageSchema
    message: ChatMessageSchema


class ChatHistoryResponse(CamelModel):
    messages: List[ChatMessageSchema]


class SuggestionsResponse(CamelModel):
    suggestions: List[str]


class UserPreferencesSchema(CamelModel):
    preferred_model: str
    confidence_threshold: float
    show_technical_details: bool


class UserPreferencesUpdate(CamelModel):
    """Partial preferences; unknown keys are kept so the service can reject them"""
    model_config = ConfigDict(extra="allow")

    preferred_model: Optional[str] = None
    confidence_threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    show_technical_details: Optional[bool] = None


class ChatContextSchema(CamelModel):
    current_model: Optional[str] = None
    last_prediction: Optional[List[Any]] = None
    user_preferences: UserPreferencesSchema


class ChatContextUpdateRequest(CamelModel):
    current_model: Optional[str] = None
    last_prediction: Optional[List[Any]] = None
    user_preferences: Optional[UserPreferencesUpdate] = None
