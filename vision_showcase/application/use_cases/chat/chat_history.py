"""Use cases for the chat history."""
from typing import Optional

from ....core.exceptions import ValidationError
from ...dto.chat_dto import ChatHistoryResponse
from ...services.chat_assistant import ChatAssistantService
from .chat_mapping import to_message_schema


class GetChatHistoryUseCase:
    def __init__(self, chat_assistant: ChatAssistantService) -> None:
        self.chat_assistant = chat_assistant

    async def execute(self, limit: Optional[int] = None) -> ChatHistoryResponse:
        if limit is not None and limit < 1:
            raise ValidationError("Limit must be at least 1")
        messages = await self.chat_assistant.get_history(limit)
        return ChatHistoryResponse(messages=[to_message_schema(message) for message in messages])


class ClearChatHistoryUseCase:
    def __init__(self, chat_assistant: ChatAssistantService) -> None:
        self.chat_assistant = chat_assistant

    async def execute(self) -> None:
        await self.chat_assistant.clear_history()
