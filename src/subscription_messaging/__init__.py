"""Messaging package providing subscription configuration and RabbitMQ subscribers."""

from .configuration import MAX_EXPIRES_MS, SubscriptionConfiguration
from .connection import RabbitMQConnection
from .contracts import IRabbitMQConnection, ISubscriptionConfiguration
from .subscriber import (
    DEFAULT_PREFETCH_COUNT,
    QueueConfig,
    Subscriber,
    SubscriberDependencies,
    Subscription,
)

__all__ = [
    "SubscriptionConfiguration",
    "ISubscriptionConfiguration",
    "MAX_EXPIRES_MS",
    "RabbitMQConnection",
    "IRabbitMQConnection",
    "QueueConfig",
    "Subscriber",
    "SubscriberDependencies",
    "Subscription",
    "DEFAULT_PREFETCH_COUNT",
]
