"""Rule-based vision assistant: keyword routing onto canned reply templates."""
import logging
import random
from dataclasses import asdict, replace
from typing import Any, Dict, List, Optional, Tuple

from ...core.config import get_settings
from ...core.exceptions import ValidationError
from ...domain.models.chat_message import ChatContext, ChatMessage, UserPreferences
from ...domain.repositories.chat_repository import ChatRepository
from ...utils.datetime_utils import now_ms
from ...utils.ids import prefixed_id
from .training_system import TrainingSystemService

logger = logging.getLogger(__name__)

VISION_KEYWORDS = [
    "classify", "detect", "recognize", "identify", "analyze", "image", "photo",
    "picture", "object", "face", "text", "ocr", "segmentation", "classification",
    "detection",
]
TRAINING_KEYWORDS = [
    "train", "learn", "improve", "accuracy", "feedback", "correct", "wrong",
    "better", "performance", "fine-tune", "optimize",
]
MODEL_KEYWORDS = [
    "model", "mobilenet", "coco", "efficientnet", "yolo", "compare", "which",
    "best", "fastest", "accurate", "recommend",
]
TECHNICAL_KEYWORDS = [
    "how", "why", "what", "tensorflow", "webgl", "browser", "performance", "fps",
    "confidence", "threshold", "parameters",
]

VISION_RESPONSES = [
    "I can help you with computer vision tasks! Upload an image and I'll analyze it using our AI models. What would you like to detect or classify?",
    "Great! I'm ready to analyze images for you. You can use our classification models for identifying objects, or detection models for finding multiple objects in an image.",
    "Perfect! Our AI vision system can handle classification, object detection, face recognition, OCR, and more. What type of analysis do you need?",
    "I'd be happy to help with image analysis! Our models process uploads as soon as they arrive. Would you like to try classification or detection?",
    "Excellent choice! Our vision AI can identify objects, read text, detect faces, and segment images. Upload an image to get started!",
]

TRAINING_RESPONSES = [
    "Our AI models are continuously learning! We currently have {samples} training samples with an average accuracy of {accuracy}%. Your feedback helps improve the models.",
    "The training system is working great! We're tracking {models} models and they're getting better with each interaction. Would you like to provide feedback on recent predictions?",
    "Fantastic question! Our models learn from user feedback. Current performance: {accuracy}% accuracy across {samples} samples. Keep the feedback coming!",
    "The AI is definitely learning! Each time you correct a prediction or provide feedback, the models get smarter. We've processed {samples} training examples so far.",
    "Yes! The models adapt based on your feedback. Current stats: {models} models trained, {accuracy}% average accuracy. Your input makes them better!",
]

MODEL_RECOMMENDATIONS = [
    {
        "condition": "speed",
        "model": "MobileNet",
        "reason": "fastest inference time (~20-50ms) and smallest size, perfect for real-time applications",
    },
    {
        "condition": "accuracy",
        "model": "EfficientNet",
        "reason": "highest accuracy with good efficiency, ideal when precision matters most",
    },
    {
        "condition": "detection",
        "model": "COCO-SSD",
        "reason": "excellent for detecting multiple objects with 80 different classes",
    },
    {
        "condition": "faces",
        "model": "BlazeFace",
        "reason": "specialized for fast and accurate face detection",
    },
]

MODEL_RESPONSES = [
    "For {condition}, I recommend **{model}** because it offers {reason}. Each model has its strengths - what's your priority?",
    "Great question! **{model}** excels at {condition} tasks due to {reason}. Would you like me to explain the differences between models?",
    "Model selection depends on your needs! For {condition}, **{model}** is ideal because {reason}. What type of task are you working on?",
    "I'd suggest **{model}** for {condition} because {reason}. Our model comparison benchmarks have the details if you want to dive deeper!",
]

TECHNICAL_RESPONSES = [
    "Each upload is stored, decoded with Pillow and handed to the model layer. Results come back as JSON and are kept in the results history.",
    "The training simulation works in batches and epochs: images are resized, normalized and augmented with numpy before each mock training step.",
    "Predictions are adjusted by what the system has learned: model accuracy from your feedback scales the confidence, and fine-tuned class weights nudge it further.",
    "Confidence is the model's score for a class between 0 and 1. The threshold you pick filters out predictions below it.",
    "Training progress is streamed over a WebSocket, so you can watch batches, epochs and throughput update live.",
]

GENERAL_RESPONSES = [
    "I'm here to help with all your computer vision needs! Whether it's image classification, object detection, or understanding how the AI works, just ask!",
    "Hello! I'm your AI vision assistant. I can help you analyze images, choose the right models, understand results, and even train the AI to work better for you.",
    "Hi there! I specialize in computer vision and machine learning. Feel free to ask about image analysis, model performance, or how to get the best results!",
    "Welcome! I'm here to guide you through our AI vision platform. Upload images, ask questions, or let me know what you'd like to analyze!",
    "Great to meet you! I can assist with image classification, object detection, model selection, and explaining how everything works. What interests you most?",
]

SUGGESTIONS = [
    "Analyze this image for me",
    "Which model should I use for object detection?",
    "How accurate are the current models?",
    "Can you explain how the AI training works?",
    "What's the difference between MobileNet and EfficientNet?",
    "How can I improve the model accuracy?",
    "Show me the model performance statistics",
    "Help me choose the best confidence threshold",
]
SUGGESTION_COUNT = 4


def classify_message(message: str) -> str:
    """Route a message to vision, training, model, technical or general (first match wins)."""
    lower = message.lower()
    for category, keywords in (
        ("vision", VISION_KEYWORDS),
        ("training", TRAINING_KEYWORDS),
        ("model", MODEL_KEYWORDS),
        ("technical", TECHNICAL_KEYWORDS),
    ):
        if any(keyword in lower for keyword in keywords):
            return category
    return "general"


class ChatAssistantService:
    """
    Chat assistant with persisted history and an in-process conversation context.
    """

    def __init__(
        self,
        chat_repository: ChatRepository,
        training_system: TrainingSystemService,
        history_limit: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.chat_repository = chat_repository
        self.training_system = training_system
        self.history_limit = history_limit if history_limit is not None else get_settings().chat_history_limit
        self._rng = rng or random.Random()
        self.context = ChatContext()

    async def send_message(self, content: str) -> Tuple[ChatMessage, ChatMessage]:
        """
        Record a user message and generate the assistant's reply.

        Raises:
            ValidationError: If the message is blank
        """
        if not content or not content.strip():
            raise ValidationError("Message content is required")

        user_message = ChatMessage(
            id=prefixed_id("msg", self._rng),
            role="user",
            content=content,
            timestamp=now_ms(),
        )
        await self.chat_repository.append(user_message)
        assistant_message = await self.generate_response(content)
        return user_message, assistant_message

    async def generate_response(self, message: str) -> ChatMessage:
        category = classify_message(message)
        handler = {
            "vision": self._handle_vision,
            "training": self._handle_training,
            "model": self._handle_model,
            "technical": self._handle_technical,
        }.get(category, self._handle_general)

        content, metadata = await handler()
        assistant_message = ChatMessage(
            id=prefixed_id("msg", self._rng),
            role="assistant",
            content=content,
            timestamp=now_ms(),
            metadata=metadata,
        )
        await self.chat_repository.append(assistant_message)
        logger.debug(f"Chat reply routed as {category}")
        return assistant_message

    async def _handle_vision(self) -> Tuple[str, Dict[str, Any]]:
        return self._rng.choice(VISION_RESPONSES), {"type": "vision"}

    async def _handle_training(self) -> Tuple[str, Dict[str, Any]]:
        stats = await self.training_system.get_training_stats()
        content = self._rng.choice(TRAINING_RESPONSES).format(
            samples=stats["total_training_samples"],
            models=stats["models_tracked"],
            accuracy=f"{stats['average_accuracy'] * 100:.1f}",
        )
        return content, {"type": "training", **stats}

    async def _handle_model(self) -> Tuple[str, Dict[str, Any]]:
        recommendation = self._rng.choice(MODEL_RECOMMENDATIONS)
        content = self._rng.choice(MODEL_RESPONSES).format(**recommendation)
        return content, {"type": "general", "recommended_model": recommendation["model"]}

    async def _handle_technical(self) -> Tuple[str, Dict[str, Any]]:
        return self._rng.choice(TECHNICAL_RESPONSES), {"type": "general"}

    async def _handle_general(self) -> Tuple[str, Dict[str, Any]]:
        return self._rng.choice(GENERAL_RESPONSES), {"type": "general"}

    async def get_history(self, limit: Optional[int] = None) -> List[ChatMessage]:
        effective = self.history_limit if limit is None else min(limit, self.history_limit)
        return await self.chat_repository.list_messages(effective)

    async def clear_history(self) -> None:
        await self.chat_repository.clear()
        logger.info("Chat history cleared")

    def update_context(
        self,
        current_model: Optional[str] = None,
        last_prediction: Optional[list] = None,
        user_preferences: Optional[Dict[str, Any]] = None,
    ) -> ChatContext:
        """Merge the given fields into the context; preferences merge field by field."""
        if current_model is not None:
            self.context.current_model = current_model
        if last_prediction is not None:
            self.context.last_prediction = last_prediction
        if user_preferences:
            unknown = set(user_preferences) - set(asdict(UserPreferences()))
            if unknown:
                raise ValidationError(f"Unknown preference(s): {', '.join(sorted(unknown))}")
            self.context.user_preferences = replace(self.context.user_preferences, **user_preferences)
        return self.context

    def get_context(self) -> ChatContext:
        return self.context

    def get_suggestions(self) -> List[str]:
        return self._rng.sample(SUGGESTIONS, SUGGESTION_COUNT)
