"""Use case for sending a message to the vision assistant."""
from ...dto.chat_dto import ChatExchangeResponse, ChatMessageRequest
from ...services.chat_assistant import ChatAssistantService
from .chat_mapping import to_message_schema


class SendChatMessageUseCase:
    """Records the user message and returns it together with the assistant's reply"""

    def __init__(self, chat_assistant: ChatAssistantService) -> None:
        self.chat_assistant = chat_assistant

    async def execute(self, request: ChatMessageRequest) -> ChatExchangeResponse:
        user_message, reply = await self.chat_assistant.send_message(request.message)
        return ChatExchangeResponse(
            user_message=to_message_schema(user_message),
            message=to_message_schema(reply),
        )
