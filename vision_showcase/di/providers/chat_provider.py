from typing import TYPE_CHECKING

from ...application.services.chat_assistant import ChatAssistantService
from ...application.use_cases.chat.chat_context import (
    GetChatContextUseCase,
    GetChatSuggestionsUseCase,
    UpdateChatContextUseCase,
)
from ...application.use_cases.chat.chat_history import ClearChatHistoryUseCase, GetChatHistoryUseCase
from ...application.use_cases.chat.send_chat_message import SendChatMessageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ChatProvider:
    """Chat use case provider - registers assistant use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (
            SendChatMessageUseCase,
            GetChatHistoryUseCase,
            ClearChatHistoryUseCase,
            GetChatContextUseCase,
            UpdateChatContextUseCase,
            GetChatSuggestionsUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(chat_assistant=container.get(ChatAssistantService)),
            )
