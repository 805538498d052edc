"""In-process event bus used for proctoring notifications."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, DefaultDict, List

logger = logging.getLogger(__name__)


@dataclass
class EventBus:
    subscribers: DefaultDict[str, List[Callable[[dict[str, object]], None]]] = field(
        default_factory=lambda: defaultdict(list)
    )

    def publish(self, topic: str, message: dict[str, object]) -> None:
        logger.debug("Publishing %s to %d subscriber(s)", topic, len(self.subscribers[topic]))
        for callback in list(self.subscribers[topic]):
            try:
                callback(message)
            except Exception:
                logger.exception("Subscriber %r failed on %s", callback, topic)

    def subscribe(self, topic: str, callback: Callable[[dict[str, object]], None]) -> None:
        self.subscribers[topic].append(callback)
