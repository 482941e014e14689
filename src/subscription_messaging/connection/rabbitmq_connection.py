"""Blocking RabbitMQ connection shared by the subscriptions of one subscriber."""

from __future__ import annotations

import logging
import os
from types import TracebackType
from typing import Optional, Type

import pika
from pika.adapters.blocking_connection import BlockingChannel, BlockingConnection
from pika.connection import Parameters

from subscription_messaging.contracts import IRabbitMQConnection

RABBITMQ_URL_ENV = "RABBITMQ_URL"


class RabbitMQConnection(IRabbitMQConnection):
    """Opens a connection lazily and keeps a single channel alive on it."""

    def __init__(self, rabbitmq_url: Optional[str] = None) -> None:
        url = (rabbitmq_url or os.getenv(RABBITMQ_URL_ENV) or "").strip()
        if not url:
            raise ValueError(
                f"RabbitMQ URL must be provided via argument or {RABBITMQ_URL_ENV} "
                "environment variable."
            )

        try:
            self._parameters: Parameters = pika.URLParameters(url)
        except ValueError as exc:
            raise ValueError(f"Invalid RabbitMQ URL provided: {url}") from exc

        self.rabbitmq_url = url
        self.connection: Optional[BlockingConnection] = None
        self.channel: Optional[BlockingChannel] = None
        self.logger = logging.getLogger(__name__)

    @property
    def is_open(self) -> bool:
        return self.connection is not None and not self.connection.is_closed

    def connect(self) -> BlockingChannel:
        if self.connection is None or self.connection.is_closed:
            self.logger.info("Connecting to RabbitMQ at %s", self.rabbitmq_url)
            try:
                self.connection = pika.BlockingConnection(self._parameters)
            except pika.exceptions.AMQPConnectionError as exc:
                self.logger.error("Failed to connect to RabbitMQ: %s", exc)
                raise
            self.channel = None

        if self.channel is None or self.channel.is_closed:
            self.logger.debug("Opening channel on %s", self.rabbitmq_url)
            self.channel = self.connection.channel()

        return self.channel

    def close(self) -> None:
        if self.channel is not None and not self.channel.is_closed:
            self.channel.close()
            self.logger.info("Closed RabbitMQ channel.")

        if self.connection is not None and not self.connection.is_closed:
            self.connection.close()
            self.logger.info("Closed RabbitMQ connection to %s", self.rabbitmq_url)

    def __enter__(self) -> RabbitMQConnection:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
