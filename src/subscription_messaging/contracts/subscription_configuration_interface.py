"""Defines the chainable contract for configuring a queue subscription."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional


class ISubscriptionConfiguration(ABC):
    """Collects subscription options; every method returns the builder for chaining.

    e.g. ``lambda config: config.add_topic("*.brighton").set_auto_delete()``
    """

    @abstractmethod
    def add_topic(self, topic: str) -> ISubscriptionConfiguration:
        """Add a routing-key pattern for the queue binding."""

    @abstractmethod
    def set_auto_delete(self, auto_delete: bool = True) -> ISubscriptionConfiguration:
        """Configure whether the queue is deleted once its last consumer goes away."""

    @abstractmethod
    def set_priority(self, priority: int) -> ISubscriptionConfiguration:
        """Configure the consumer's priority."""

    @abstractmethod
    def set_cancel_on_ha_failover(
        self, cancel_on_ha_failover: bool = True
    ) -> ISubscriptionConfiguration:
        """Configure the consumer's ``x-cancel-on-ha-failover`` attribute."""

    @abstractmethod
    def set_prefetch_count(self, prefetch_count: int) -> ISubscriptionConfiguration:
        """Configure the consumer's prefetch count."""

    @abstractmethod
    def set_expires_to_maximum(self) -> ISubscriptionConfiguration:
        """Set the queue expiry to the maximum allowed (24 days)."""

    @abstractmethod
    def set_expires_ms(self, expires: int) -> ISubscriptionConfiguration:
        """Set the queue expiry in milliseconds.

        Expiry controls how long a queue can be unused before the broker deletes it.
        Unused means the queue has no consumers, has not been redeclared and
        ``basic.get`` has not been invoked for at least the expiration period.
        The value is capped at 24 days and should not be zero.
        """

    @abstractmethod
    def set_expires_duration(self, expires: timedelta) -> ISubscriptionConfiguration:
        """Set the queue expiry from a duration, capped at 24 days."""

    @abstractmethod
    def set_expires_days(self, expires: int) -> ISubscriptionConfiguration:
        """Set the queue expiry in whole days, capped at 24."""

    @abstractmethod
    def set_message_ttl(self, ttl: Optional[timedelta]) -> ISubscriptionConfiguration:
        """Set how long a message may stay on the queue; ``None`` removes the TTL."""

    @abstractmethod
    def set_exclusive(self) -> ISubscriptionConfiguration:
        """Configure the consumer to be exclusive."""
