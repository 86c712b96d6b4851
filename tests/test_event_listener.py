import logging
from popups.core.event_listener import EventListener
from popups.core.popup_event import PopupEvent, PopupEventType
from tests.test_utils import EventCollector


def test_filtered_subscription_only_receives_matching_types():
    listener = EventListener()
    shown = EventCollector()
    listener.subscribe(shown.on_event, [PopupEventType.SHOWN])
    listener.publish(PopupEvent(PopupEventType.SHOW_STARTED))
    listener.publish(PopupEvent(PopupEventType.SHOWN))
    assert shown.types() == [PopupEventType.SHOWN]


def test_unsubscribe_stops_delivery():
    listener = EventListener()
    col = EventCollector()
    listener.subscribe(col.on_event)
    listener.unsubscribe(col.on_event)
    listener.publish(PopupEvent(PopupEventType.HIDDEN))
    assert col.events == []


def test_events_published_during_dispatch_are_queued():
    listener = EventListener()
    col = EventCollector()
    def chain(ev):
        if ev.type == PopupEventType.HIDE_STARTED:
            listener.publish(PopupEvent(PopupEventType.HIDDEN))
    listener.subscribe(chain)
    listener.subscribe(col.on_event)
    listener.publish(PopupEvent(PopupEventType.HIDE_STARTED))
    assert col.types() == [PopupEventType.HIDE_STARTED, PopupEventType.HIDDEN]


def test_failing_subscriber_is_logged_and_others_still_run(caplog):
    listener = EventListener()
    col = EventCollector()
    def boom(ev):
        raise RuntimeError("boom")
    listener.subscribe(boom)
    listener.subscribe(col.on_event)
    with caplog.at_level(logging.ERROR, logger="popups.core.event_listener"):
        listener.publish(PopupEvent(PopupEventType.SHOWN, payload={"k": 1}))
    assert col.types() == [PopupEventType.SHOWN]
    assert col.events[0].get("k") == 1
    assert "boom" in caplog.text


def test_source_filter_delivers_only_that_sources_events():
    listener = EventListener()
    first, second = object(), object()
    col = EventCollector()
    listener.subscribe(col.on_event, [PopupEventType.HIDDEN], source=first)
    listener.publish(PopupEvent(PopupEventType.HIDDEN, source=second))
    listener.publish(PopupEvent(PopupEventType.HIDDEN, source=first))
    listener.publish(PopupEvent(PopupEventType.SHOWN, source=first))
    assert [e.source for e in col.events] == [first]


def test_unsubscribe_drops_source_filter():
    listener = EventListener()
    src = object()
    col = EventCollector()
    listener.subscribe(col.on_event, source=src)
    listener.unsubscribe(col.on_event)
    listener.subscribe(col.on_event)
    listener.publish(PopupEvent(PopupEventType.SHOWN, source=object()))
    assert col.types() == [PopupEventType.SHOWN]
