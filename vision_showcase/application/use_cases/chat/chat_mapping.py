from dataclasses import asdict

from ....domain.models.chat_message import ChatContext, ChatMessage
from ...dto.chat_dto import ChatContextSchema, ChatMessageSchema, UserPreferencesSchema


def to_message_schema(message: ChatMessage) -> ChatMessageSchema:
    return ChatMessageSchema(
        id=message.id,
        role=message.role,
        content=message.content,
        timestamp=message.timestamp,
        metadata=message.metadata,
    )


def to_context_schema(context: ChatContext) -> ChatContextSchema:
    return ChatContextSchema(
        current_model=context.current_model,
        last_prediction=context.last_prediction,
        user_preferences=UserPreferencesSchema(**asdict(context.user_preferences)),
    )
