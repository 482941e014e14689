"""Defines the contract for the broker connection used by subscribers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from pika.adapters.blocking_connection import BlockingChannel


class IRabbitMQConnection(ABC):
    """Hands out a blocking channel on which subscriptions are declared and consumed."""

    @abstractmethod
    def connect(self) -> BlockingChannel:
        """Return an open channel, opening the connection first when needed."""

    @abstractmethod
    def close(self) -> None:
        """Close the channel and the connection if they are open."""

    @abstractmethod
    def __enter__(self) -> IRabbitMQConnection: ...

    @abstractmethod
    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None: ...
