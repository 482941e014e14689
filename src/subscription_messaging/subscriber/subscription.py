"""Handle returned for every active subscription."""

from __future__ import annotations

import logging
from typing import Optional

from pika.adapters.blocking_connection import BlockingChannel

from subscription_messaging.configuration import SubscriptionConfiguration


class Subscription:
    """Tracks the consumer created for one queue so it can be cancelled."""

    def __init__(
        self,
        *,
        channel: BlockingChannel,
        queue_name: str,
        consumer_tag: str,
        configuration: SubscriptionConfiguration,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.channel = channel
        self.queue_name = queue_name
        self.consumer_tag = consumer_tag
        self.configuration = configuration
        self.cancelled = False
        self.logger = logger or logging.getLogger(__name__)

    def cancel(self) -> None:
        if self.cancelled:
            return

        if not self.channel.is_closed:
            self.channel.basic_cancel(self.consumer_tag)
            self.logger.info("Cancelled consumer %s on %s", self.consumer_tag, self.queue_name)
        self.cancelled = True

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()
