from popups.core.completion import CompletionChannel


def test_fire_without_subscriber_consumes_cycle():
    ch = CompletionChannel()
    cycle = ch.begin_cycle()
    assert not ch.has_subscriber
    assert ch.fire(cycle) is False
    assert ch.fired(cycle)


def test_fires_at_most_once_per_cycle():
    ch = CompletionChannel()
    calls = []
    ch.set(lambda: calls.append(1))
    ch.begin_cycle()
    assert ch.fire() is True
    assert ch.fire() is False
    assert calls == [1]
    ch.begin_cycle()
    assert not ch.fired()
    assert ch.fire() is True
    assert calls == [1, 1]


def test_finishing_old_cycle_after_new_one_began_leaves_new_cycle_armed():
    ch = CompletionChannel()
    calls = []
    ch.set(lambda: calls.append(1))
    first = ch.begin_cycle()
    second = ch.begin_cycle()
    assert ch.fire(first) is True
    assert ch.fire(first) is False
    assert not ch.fired(second)
    assert ch.fire(second) is True
    assert calls == [1, 1]


def test_set_replaces_and_clear_removes():
    ch = CompletionChannel()
    calls = []
    ch.set(lambda: calls.append('a'))
    ch.set(lambda: calls.append('b'))
    ch.begin_cycle()
    ch.fire()
    assert calls == ['b']
    ch.clear()
    ch.begin_cycle()
    assert ch.fire() is False
    assert calls == ['b']
