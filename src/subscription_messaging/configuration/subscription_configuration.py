"""Fluent builder for per-subscription queue and consumer options."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import List, Optional

from subscription_messaging.contracts import ISubscriptionConfiguration

MAX_INT32 = 2**31 - 1
MAX_EXPIRES_DAYS = 24
MAX_EXPIRES = timedelta(days=MAX_EXPIRES_DAYS)
MAX_EXPIRES_MS = MAX_EXPIRES_DAYS * 24 * 60 * 60 * 1000

logger = logging.getLogger(__name__)


def to_milliseconds(duration: timedelta) -> int:
    """Convert ``duration`` to whole milliseconds, truncating toward zero."""
    seconds = duration.days * 86400 + duration.seconds
    microseconds = seconds * 1_000_000 + duration.microseconds
    milliseconds = abs(microseconds) // 1000
    return milliseconds if microseconds >= 0 else -milliseconds


class SubscriptionConfiguration(ISubscriptionConfiguration):
    """Accumulates subscription options and exposes their normalized values.

    Every queue expiry is stored in milliseconds and capped at 24 days, whichever
    setter produced it. Values above the cap are reduced silently.
    """

    def __init__(self, default_prefetch_count: int) -> None:
        self.topics: List[str] = []
        self.auto_delete = False
        self.priority = 0
        self.cancel_on_ha_failover = False
        self.prefetch_count = default_prefetch_count
        self.expires_ms: Optional[int] = None
        self.message_ttl_ms: Optional[int] = None
        self.is_exclusive = False

    def add_topic(self, topic: str) -> SubscriptionConfiguration:
        self.topics.append(topic)
        return self

    def set_auto_delete(self, auto_delete: bool = True) -> SubscriptionConfiguration:
        self.auto_delete = auto_delete
        return self

    def set_priority(self, priority: int) -> SubscriptionConfiguration:
        self.priority = priority
        return self

    def set_cancel_on_ha_failover(
        self, cancel_on_ha_failover: bool = True
    ) -> SubscriptionConfiguration:
        self.cancel_on_ha_failover = cancel_on_ha_failover
        return self

    def set_prefetch_count(self, prefetch_count: int) -> SubscriptionConfiguration:
        self.prefetch_count = prefetch_count
        return self

    def set_expires_to_maximum(self) -> SubscriptionConfiguration:
        return self.set_expires_ms(MAX_INT32)

    def set_expires_ms(self, expires: int) -> SubscriptionConfiguration:
        if expires > MAX_EXPIRES_MS:
            logger.debug(
                "Queue expiry %sms exceeds 24 days, capping at %sms", expires, MAX_EXPIRES_MS
            )
            expires = MAX_EXPIRES_MS
        self.expires_ms = expires
        return self

    def set_expires_duration(self, expires: timedelta) -> SubscriptionConfiguration:
        if expires > MAX_EXPIRES:
            logger.debug("Queue expiry %s exceeds 24 days, capping", expires)
            expires = MAX_EXPIRES
        self.expires_ms = to_milliseconds(expires)
        return self

    def set_expires_days(self, expires: int) -> SubscriptionConfiguration:
        if expires > MAX_EXPIRES_DAYS:
            logger.debug("Queue expiry of %s days exceeds 24 days, capping", expires)
            expires = MAX_EXPIRES_DAYS
        self.expires_ms = to_milliseconds(timedelta(days=expires))
        return self

    def set_message_ttl(self, ttl: Optional[timedelta]) -> SubscriptionConfiguration:
        # None clears a previously configured TTL
        self.message_ttl_ms = to_milliseconds(ttl) if ttl is not None else None
        return self

    def set_exclusive(self) -> SubscriptionConfiguration:
        self.is_exclusive = True
        return self
