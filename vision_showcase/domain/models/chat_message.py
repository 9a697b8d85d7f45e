# Standard library imports
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

CHAT_ROLES = ("user", "assistant", "system")


@dataclass
class ChatMessage:
    """Pure domain model for a chat message"""
    id: str
    role: str
    content: str
    timestamp: int
    metadata: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if self.role not in CHAT_ROLES:
            raise ValueError(f"Invalid chat role: {self.role}")


@dataclass
class UserPreferences:
    preferred_model: str = "mobilenet"
    confidence_threshold: float = 0.5
    show_technical_details: bool = False


@dataclass
class ChatContext:
    """Conversation context the assistant can consult"""
    current_model: Optional[str] = None
    last_prediction: Optional[list] = None
    user_preferences: UserPreferences = field(default_factory=UserPreferences)
