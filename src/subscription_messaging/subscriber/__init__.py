"""Subscription setup against a RabbitMQ broker."""

from .queue_arguments import build_consumer_arguments, build_queue_arguments
from .queue_config import DEFAULT_EXCHANGE, QueueConfig
from .subscriber import CATCH_ALL_TOPIC, Subscriber
from .subscriber_config import (
    DEFAULT_PREFETCH_COUNT,
    PREFETCH_COUNT_ENV,
    SubscriberDependencies,
    default_prefetch_count_from_env,
)
from .subscription import Subscription

__all__ = [
    "CATCH_ALL_TOPIC",
    "DEFAULT_EXCHANGE",
    "DEFAULT_PREFETCH_COUNT",
    "PREFETCH_COUNT_ENV",
    "QueueConfig",
    "Subscriber",
    "SubscriberDependencies",
    "Subscription",
    "build_consumer_arguments",
    "build_queue_arguments",
    "default_prefetch_count_from_env",
]
