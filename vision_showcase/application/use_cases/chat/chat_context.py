"""Use cases for the assistant's conversation context and suggestions."""
from ...dto.chat_dto import ChatContextSchema, ChatContextUpdateRequest, SuggestionsResponse
from ...services.chat_assistant import ChatAssistantService
from .chat_mapping import to_context_schema


class GetChatContextUseCase:
    def __init__(self, chat_assistant: ChatAssistantService) -> None:
        self.chat_assistant = chat_assistant

    async def execute(self) -> ChatContextSchema:
        return to_context_schema(self.chat_assistant.get_context())


class UpdateChatContextUseCase:
    """Merges the provided context fields; preferences merge field by field"""

    def __init__(self, chat_assistant: ChatAssistantService) -> None:
        self.chat_assistant = chat_assistant

    async def execute(self, request: ChatContextUpdateRequest) -> ChatContextSchema:
        # Extra keys are part of the dump and get rejected by the assistant
        preferences = (
            request.user_preferences.model_dump(exclude_none=True)
            if request.user_preferences is not None
            else None
        )
        context = self.chat_assistant.update_context(
            current_model=request.current_model,
            last_prediction=request.last_prediction,
            user_preferences=preferences,
        )
        return to_context_schema(context)


class GetChatSuggestionsUseCase:
    def __init__(self, chat_assistant: ChatAssistantService) -> None:
        self.chat_assistant = chat_assistant

    async def execute(self) -> SuggestionsResponse:
        return SuggestionsResponse(suggestions=self.chat_assistant.get_suggestions())
