import logging
from typing import Callable, List, Optional

import pika
from pika.adapters.blocking_connection import BlockingChannel

from subscription_messaging.configuration import SubscriptionConfiguration
from subscription_messaging.contracts import IRabbitMQConnection, ISubscriptionConfiguration

from .queue_arguments import build_consumer_arguments, build_queue_arguments
from .queue_config import QueueConfig
from .subscriber_config import SubscriberDependencies
from .subscription import Subscription

MessageHandler = Callable[[bytes], None]
Configure = Callable[[ISubscriptionConfiguration], object]

CATCH_ALL_TOPIC = "#"


class Subscriber:
    """Declares subscription queues from their configuration and dispatches deliveries."""

    def __init__(
        self,
        *,
        connection: IRabbitMQConnection,
        queue_config: QueueConfig,
        default_prefetch_count: int,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.connection = connection
        self.queue_config = queue_config
        self.default_prefetch_count = default_prefetch_count
        self.subscriptions: List[Subscription] = []

    @classmethod
    def from_url(
        cls,
        rabbitmq_url: Optional[str] = None,
        *,
        dependencies: Optional[SubscriberDependencies] = None,
    ) -> "Subscriber":
        deps = dependencies or SubscriberDependencies()

        return cls(
            connection=deps.make_connection(rabbitmq_url),
            queue_config=deps.queue_config,
            default_prefetch_count=deps.default_prefetch_count,
        )

    @staticmethod
    def queue_name_for(endpoint: str, subscription_id: Optional[str] = None) -> str:
        if subscription_id is None:
            return endpoint
        return f"{endpoint}_{subscription_id}"

    def configure(self, configure: Optional[Configure] = None) -> SubscriptionConfiguration:
        """Build a configuration seeded with the default prefetch and apply ``configure``."""
        config = SubscriptionConfiguration(self.default_prefetch_count)
        if configure is not None:
            configure(config)
        return config

    def subscribe(
        self,
        endpoint: str,
        handler: MessageHandler,
        subscription_id: Optional[str] = None,
        configure: Optional[Configure] = None,
    ) -> Subscription:
        config = self.configure(configure)
        queue_name = self.queue_name_for(endpoint, subscription_id)
        channel = self.connection.connect()

        channel.exchange_declare(
            exchange=self.queue_config.exchange,
            exchange_type=self.queue_config.exchange_type,
            durable=self.queue_config.durable,
        )
        channel.queue_declare(
            queue=queue_name,
            durable=self.queue_config.durable,
            auto_delete=config.auto_delete,
            arguments=build_queue_arguments(config) or None,
        )
        for topic in config.topics or [CATCH_ALL_TOPIC]:
            channel.queue_bind(
                queue=queue_name,
                exchange=self.queue_config.exchange,
                routing_key=topic,
            )

        channel.basic_qos(prefetch_count=config.prefetch_count)
        consumer_tag = channel.basic_consume(
            queue=queue_name,
            on_message_callback=self._make_callback(handler, queue_name),
            exclusive=config.is_exclusive,
            arguments=build_consumer_arguments(config) or None,
        )

        self.logger.info(
            "Subscribed to %s with topics=%s, prefetch_count=%s",
            queue_name,
            config.topics or [CATCH_ALL_TOPIC],
            config.prefetch_count,
        )

        subscription = Subscription(
            channel=channel,
            queue_name=queue_name,
            consumer_tag=consumer_tag,
            configuration=config,
        )
        self.subscriptions.append(subscription)
        return subscription

    def start(self) -> None:
        channel = self.connection.connect()
        self.logger.info("Started consuming %s subscription(s)", len(self.subscriptions))
        try:
            channel.start_consuming()
        except KeyboardInterrupt:
            self.logger.info("Stopping subscriber...")
            channel.stop_consuming()
        finally:
            self.connection.close()

    def _make_callback(self, handler: MessageHandler, queue_name: str):
        def on_message(
            channel: BlockingChannel,
            method: pika.spec.Basic.Deliver,
            properties: pika.spec.BasicProperties,
            body: bytes,
        ) -> None:
            self.logger.debug(
                "Received message on %s with routing_key=%s", queue_name, method.routing_key
            )
            try:
                handler(body)
            except Exception as exc:
                self.logger.error(
                    "Handler failed for message on %s: %s", queue_name, exc, exc_info=True
                )
                channel.basic_reject(delivery_tag=method.delivery_tag, requeue=False)
                return

            channel.basic_ack(delivery_tag=method.delivery_tag)

        return on_message
