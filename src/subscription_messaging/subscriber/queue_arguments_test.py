"""Tests for queue and consumer argument translation."""

from datetime import timedelta

from subscription_messaging.configuration import MAX_EXPIRES_MS, SubscriptionConfiguration
from subscription_messaging.subscriber import build_consumer_arguments, build_queue_arguments


def test_default_configuration_has_no_arguments():
    config = SubscriptionConfiguration(10)

    assert build_queue_arguments(config) == {}
    assert build_consumer_arguments(config) == {}


def test_queue_arguments_include_expiry_and_ttl():
    config = (
        SubscriptionConfiguration(10)
        .set_expires_days(30)
        .set_message_ttl(timedelta(seconds=5))
    )

    assert build_queue_arguments(config) == {
        "x-expires": MAX_EXPIRES_MS,
        "x-message-ttl": 5000,
    }


def test_cleared_ttl_is_omitted():
    config = SubscriptionConfiguration(10).set_message_ttl(timedelta(seconds=5))
    config.set_message_ttl(None)

    assert "x-message-ttl" not in build_queue_arguments(config)


def test_consumer_arguments_include_priority_and_failover():
    config = SubscriptionConfiguration(10).set_priority(-2).set_cancel_on_ha_failover()

    assert build_consumer_arguments(config) == {
        "x-priority": -2,
        "x-cancel-on-ha-failover": True,
    }
