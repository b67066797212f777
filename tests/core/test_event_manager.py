"""
test_event_manager.py
---------------------
Unit tests for the session event bus.
"""

from comet_dodge.core.services.event_manager import (
    EventManager,
    PlayerHitEvent,
    SessionEndedEvent,
)


def test_dispatch_reaches_only_matching_subscribers():
    events = EventManager()
    hits, ends = [], []
    events.subscribe(PlayerHitEvent, hits.append)
    events.subscribe(SessionEndedEvent, ends.append)

    events.dispatch(PlayerHitEvent(lives_left=2))

    assert hits == [PlayerHitEvent(lives_left=2)]
    assert ends == []


def test_duplicate_subscription_is_ignored():
    events = EventManager()
    received = []
    events.subscribe(PlayerHitEvent, received.append)
    events.subscribe(PlayerHitEvent, received.append)

    events.dispatch(PlayerHitEvent(lives_left=1))

    assert len(received) == 1


def test_failing_callback_does_not_block_others():
    events = EventManager()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    events.subscribe(PlayerHitEvent, broken)
    events.subscribe(PlayerHitEvent, received.append)

    events.dispatch(PlayerHitEvent(lives_left=0))

    assert received == [PlayerHitEvent(lives_left=0)]


def test_unsubscribed_callback_no_longer_receives():
    events = EventManager()
    received = []
    events.subscribe(PlayerHitEvent, received.append)
    events.unsubscribe(PlayerHitEvent, received.append)

    events.dispatch(PlayerHitEvent(lives_left=2))

    assert received == []


def test_unsubscribe_unknown_callback_is_harmless():
    events = EventManager()

    events.unsubscribe(SessionEndedEvent, print)

    events.dispatch(SessionEndedEvent(score=1, best=1))
