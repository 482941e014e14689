"""Translates a subscription configuration into broker argument tables."""

from __future__ import annotations

from typing import Any, Dict

from subscription_messaging.configuration import SubscriptionConfiguration


def build_queue_arguments(config: SubscriptionConfiguration) -> Dict[str, Any]:
    """Return the ``queue.declare`` arguments for ``config``."""
    arguments: Dict[str, Any] = {}
    if config.expires_ms is not None:
        arguments["x-expires"] = config.expires_ms
    if config.message_ttl_ms is not None:
        arguments["x-message-ttl"] = config.message_ttl_ms
    return arguments


def build_consumer_arguments(config: SubscriptionConfiguration) -> Dict[str, Any]:
    """Return the ``basic.consume`` arguments for ``config``."""
    arguments: Dict[str, Any] = {}
    if config.priority != 0:
        arguments["x-priority"] = config.priority
    if config.cancel_on_ha_failover:
        arguments["x-cancel-on-ha-failover"] = True
    return arguments
