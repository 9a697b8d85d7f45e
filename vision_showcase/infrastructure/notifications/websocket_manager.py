"""Fan-out of training job updates to the WebSockets watching each job."""

import json
import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, Optional, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class WebSocketManager:
    """
    Keeps the sockets subscribed to each training job and publishes job
    messages to them.

    A channel is a job id. Subscriptions are only touched from the event
    loop, so no locking is needed.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, Set[WebSocket]] = defaultdict(set)

    async def add_connection(self, channel: str, websocket: WebSocket) -> None:
        self._subscribers[channel].add(websocket)
        logger.info(f"Socket subscribed to job {channel} ({len(self._subscribers[channel])} watching)")

    async def remove_connection(self, channel: str, websocket: WebSocket) -> None:
        self._discard(channel, [websocket])
        logger.info(f"Socket unsubscribed from job {channel}")

    async def send_to_channel(self, channel: str, message: Dict[str, Any]) -> int:
        """
        Publish a job message to every socket watching the job.

        Sockets that fail to receive it are unsubscribed.

        Returns:
            How many sockets received the message
        """
        watchers = list(self._subscribers.get(channel, ()))
        if not watchers:
            return 0

        payload = json.dumps(message)
        delivered = 0
        failed = []
        for websocket in watchers:
            try:
                await websocket.send_text(payload)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping socket on job {channel}: {e}")
                failed.append(websocket)

        self._discard(channel, failed)
        return delivered

    def subscriber_count(self, channel: Optional[str] = None) -> int:
        """Sockets watching one job, or all jobs when no channel is given."""
        if channel is not None:
            return len(self._subscribers.get(channel, ()))
        return sum(len(watchers) for watchers in self._subscribers.values())

    def _discard(self, channel: str, websockets: Iterable[WebSocket]) -> None:
        watchers = self._subscribers.get(channel)
        if watchers is None:
            return
        watchers.difference_update(websockets)
        if not watchers:
            del self._subscribers[channel]
