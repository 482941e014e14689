"""Broker connectivity for subscribers."""

from .rabbitmq_connection import RABBITMQ_URL_ENV, RabbitMQConnection

__all__ = ["RABBITMQ_URL_ENV", "RabbitMQConnection"]
