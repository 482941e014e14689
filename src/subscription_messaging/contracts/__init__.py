"""Contract interfaces for subscription messaging."""

from .rabbitmq_connection_interface import IRabbitMQConnection
from .subscription_configuration_interface import ISubscriptionConfiguration

__all__ = [
    "IRabbitMQConnection",
    "ISubscriptionConfiguration",
]
