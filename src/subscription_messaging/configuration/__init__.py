"""Subscription configuration builder."""

from .subscription_configuration import (
    MAX_EXPIRES_DAYS,
    MAX_EXPIRES_MS,
    MAX_INT32,
    SubscriptionConfiguration,
    to_milliseconds,
)

__all__ = [
    "SubscriptionConfiguration",
    "MAX_EXPIRES_DAYS",
    "MAX_EXPIRES_MS",
    "MAX_INT32",
    "to_milliseconds",
]
