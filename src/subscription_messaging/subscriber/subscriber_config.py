"""Configuration primitives for wiring a `Subscriber`."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from subscription_messaging.connection import RabbitMQConnection
from subscription_messaging.contracts import IRabbitMQConnection

from .queue_config import QueueConfig

DEFAULT_PREFETCH_COUNT = 50
PREFETCH_COUNT_ENV = "RABBITMQ_PREFETCH_COUNT"


def default_prefetch_count_from_env() -> int:
    """Read the default prefetch count from the environment, falling back to 50."""
    raw = (os.getenv(PREFETCH_COUNT_ENV) or "").strip()
    if not raw:
        return DEFAULT_PREFETCH_COUNT

    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{PREFETCH_COUNT_ENV} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class SubscriberDependencies:
    """Bundles factory functions and defaults for subscriber wiring."""

    queue_config: QueueConfig = field(default_factory=QueueConfig)
    default_prefetch_count: int = field(default_factory=default_prefetch_count_from_env)
    make_connection: Callable[[Optional[str]], IRabbitMQConnection] = field(
        default=lambda rabbitmq_url: RabbitMQConnection(rabbitmq_url)
    )
