"""Provides exchange and queue declaration defaults shared by all subscriptions."""

from dataclasses import dataclass

DEFAULT_EXCHANGE = "subscriptions"


@dataclass(frozen=True)
class QueueConfig:
    """Encapsulates the exchange every subscription queue is bound to.

    Per-subscription options (topics, auto-delete, expiry, TTL) live on
    ``SubscriptionConfiguration``; this only covers what the subscriber decides
    for every queue it declares.
    """

    exchange: str = DEFAULT_EXCHANGE
    exchange_type: str = "topic"
    durable: bool = True
