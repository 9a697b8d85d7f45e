"""
Image worker
------------

Message-driven image processing worker. A message is {"type", "data"};
handling it yields the messages the worker emits, in order. Callers run
`handle_message` off the event loop (asyncio.to_thread).

Message types:
    process_batch    -> batch_progress (every 10th image), batch_processed
    preprocess_image -> image_preprocessed
    augment_image    -> image_augmented
    anything else    -> error
"""

import logging
import random
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

WORKER_AUGMENTATIONS = ["rotation", "flip", "brightness", "contrast", "noise"]
PROGRESS_EVERY = 10


def _message(message_type: str, data: Any) -> Dict[str, Any]:
    return {"type": message_type, "data": data}


def process_batch(batch_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    images = batch_data["images"]
    config = batch_data.get("config") or {}
    messages: List[Dict[str, Any]] = []
    processed_images = []

    for i, image in enumerate(images):
        transformations = ["resize", "normalize"]
        if config.get("augmentation"):
            transformations.append("augment")

        processed_images.append({
            **image,
            "processed": True,
            "processing_time": random.random() * 100 + 50,
            "transformations": transformations,
        })

        if i % PROGRESS_EVERY == 0:
            messages.append(_message("batch_progress", {
                "processed": i + 1,
                "total": len(images),
                "progress": (i + 1) / len(images) * 100,
            }))

    messages.append(_message("batch_processed", {
        "processed_images": processed_images,
        "batch_id": batch_data.get("batch_id"),
        "processing_time": sum(img["processing_time"] for img in processed_images),
    }))
    return messages


def preprocess_image(image_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [_message("image_preprocessed", {
        **image_data,
        "width": 224,
        "height": 224,
        "channels": 3,
        "normalized": True,
        "processing_time": random.random() * 20 + 10,
    })]


def augment_image(image_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    applied = [name for name in WORKER_AUGMENTATIONS if random.random() > 0.5]
    return [_message("image_augmented", {
        **image_data,
        "augmentations": applied,
        "processing_time": len(applied) * 5 + random.random() * 10,
    })]


_HANDLERS = {
    "process_batch": (process_batch, "Batch processing failed"),
    "preprocess_image": (preprocess_image, "Image preprocessing failed"),
    "augment_image": (augment_image, "Image augmentation failed"),
}


def handle_message(message: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Handle one worker message.

    Args:
        message: {"type": str, "data": Any}

    Returns:
        Emitted messages; failures become a single error message
    """
    message_type = message.get("type")
    handler = _HANDLERS.get(message_type)
    if handler is None:
        return [_message("error", f"Unknown message type: {message_type}")]

    fn, failure_prefix = handler
    try:
        return fn(message.get("data") or {})
    except (KeyError, TypeError, ValueError, ZeroDivisionError) as e:
        logger.warning(f"{failure_prefix}: {e}")
        return [_message("error", f"{failure_prefix}: {e}")]
