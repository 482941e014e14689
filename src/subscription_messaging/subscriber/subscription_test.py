"""Tests for the Subscription handle."""

from unittest.mock import Mock

from subscription_messaging.configuration import SubscriptionConfiguration
from subscription_messaging.subscriber import Subscription


def _subscription(channel):
    return Subscription(
        channel=channel,
        queue_name="orders",
        consumer_tag="ctag-1",
        configuration=SubscriptionConfiguration(10),
    )


def test_cancel_cancels_consumer_once():
    channel = Mock(is_closed=False)
    subscription = _subscription(channel)

    subscription.cancel()
    subscription.cancel()

    channel.basic_cancel.assert_called_once_with("ctag-1")
    assert subscription.cancelled is True


def test_cancel_on_closed_channel_is_noop():
    channel = Mock(is_closed=True)
    subscription = _subscription(channel)

    subscription.cancel()

    channel.basic_cancel.assert_not_called()
    assert subscription.cancelled is True


def test_context_manager_cancels():
    channel = Mock(is_closed=False)

    with _subscription(channel):
        pass

    channel.basic_cancel.assert_called_once_with("ctag-1")
