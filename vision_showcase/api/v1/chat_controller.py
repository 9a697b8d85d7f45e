# Standard library imports
from typing import Dict, Optional

# External package imports
from fastapi import APIRouter, Query

# Local application imports
from ...application.dto.chat_dto import (
    ChatContextSchema,
    ChatContextUpdateRequest,
    ChatExchangeResponse,
    ChatHistoryResponse,
    ChatMessageRequest,
    SuggestionsResponse,
)
from ...application.use_cases.chat.chat_context import (
    GetChatContextUseCase,
    GetChatSuggestionsUseCase,
    UpdateChatContextUseCase,
)
from ...application.use_cases.chat.chat_history import ClearChatHistoryUseCase, GetChatHistoryUseCase
from ...application.use_cases.chat.send_chat_message import SendChatMessageUseCase
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["chat"])


@router.post("/message", response_model=ChatExchangeResponse, response_model_exclude_none=True)
async def send_message(request: ChatMessageRequest) -> ChatExchangeResponse:
    """
    Send a message to the vision assistant

    Args:
        request: Chat message request with the user's message

    Returns:
        ChatExchangeResponse with the stored user message and the assistant's reply
    """
    container = get_container()
    send_message_use_case = container.get(SendChatMessageUseCase)

    try:
        return await send_message_use_case.execute(request=request)
    except Exception as exception:
        raise to_http_exception(exception)


@router.get("/history", response_model=ChatHistoryResponse, response_model_exclude_none=True)
async def get_history(limit: Optional[int] = Query(None)) -> ChatHistoryResponse:
    container = get_container()
    history_use_case = container.get(GetChatHistoryUseCase)

    try:
        return await history_use_case.execute(limit=limit)
    except Exception as exception:
        raise to_http_exception(exception)


@router.delete("/history")
async def clear_history() -> Dict[str, str]:
    container = get_container()
    clear_use_case = container.get(ClearChatHistoryUseCase)

    try:
        await clear_use_case.execute()
    except Exception as exception:
        raise to_http_exception(exception)
    return {"status": "cleared"}


@router.get("/suggestions", response_model=SuggestionsResponse)
async def get_suggestions() -> SuggestionsResponse:
    container = get_container()
    return await container.get(GetChatSuggestionsUseCase).execute()


@router.get("/context", response_model=ChatContextSchema)
async def get_context() -> ChatContextSchema:
    container = get_container()
    return await container.get(GetChatContextUseCase).execute()


@router.patch("/context", response_model=ChatContextSchema)
async def update_context(request: ChatContextUpdateRequest) -> ChatContextSchema:
    """Merge the given context fields; user preferences merge field by field"""
    container = get_container()
    update_use_case = container.get(UpdateChatContextUseCase)

    try:
        return await update_use_case.execute(request=request)
    except Exception as exception:
        raise to_http_exception(exception)
