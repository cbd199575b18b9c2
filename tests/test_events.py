from __future__ import annotations

import logging
from unittest.mock import Mock

from hudmanager.errors import HudIOError
from hudmanager.errors.handler import ErrorHandler, ErrorOccurredEvent, ErrorSeverity
from hudmanager.events.bus import EventBus
from hudmanager.events.hud_events import HudActivatedEvent, HudsScannedEvent


def test_publish_reaches_only_matching_subscribers() -> None:
    bus = EventBus()
    scanned, activated = [], []
    bus.subscribe(HudsScannedEvent, scanned.append)
    bus.subscribe(HudActivatedEvent, activated.append)

    bus.publish(HudsScannedEvent(hud_count=3))

    assert len(scanned) == 1
    assert activated == []


def test_cancelled_subscription_is_skipped() -> None:
    bus = EventBus()
    received = []
    sub = bus.subscribe(HudsScannedEvent, received.append)
    sub.cancel()
    bus.publish(HudsScannedEvent())
    assert received == []

    sub = bus.subscribe(HudsScannedEvent, received.append)
    bus.unsubscribe(sub)
    bus.publish(HudsScannedEvent())
    assert received == []


def test_failing_handler_does_not_block_others() -> None:
    bus = EventBus(logger=Mock())
    received = []
    bus.subscribe(HudsScannedEvent, Mock(side_effect=RuntimeError("boom")))
    bus.subscribe(HudsScannedEvent, received.append)
    bus.publish(HudsScannedEvent())
    assert len(received) == 1


def test_error_handler_reports_once_everywhere() -> None:
    logger = Mock(spec=logging.Logger)
    bus = EventBus()
    published = []
    bus.subscribe(ErrorOccurredEvent, published.append)
    handler = ErrorHandler(logger, bus)
    status = []
    handler.register_status_callback(lambda message, severity: status.append((message, severity)))

    error = HudIOError("failed to move hud")
    handler.handle(error)

    logger.error.assert_called_once()
    assert published[0].error is error
    assert status == [("failed to move hud", ErrorSeverity.ERROR)]
    assert handler.last_error is error


def test_error_handler_info_skips_status() -> None:
    handler = ErrorHandler(Mock(spec=logging.Logger))
    status = []
    handler.register_status_callback(lambda message, severity: status.append(message))
    handler.handle(HudIOError("quiet"), ErrorSeverity.INFO)
    assert status == []
