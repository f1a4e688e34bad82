"""Tests for the translator session state container."""

import logging

import pytest

from gesturio.core.types import Screen

from ..session import SessionSnapshot, TranslatorSession


@pytest.fixture
def session(resolver):
    return TranslatorSession(resolver, max_input_length=20)


class TestNavigation:
    """Home/translator switching."""

    def test_starts_on_home(self, session):
        assert session.screen is Screen.HOME
        assert session.snapshot.screen is Screen.HOME

    def test_start(self, session):
        snapshot = session.start()

        assert snapshot.screen is Screen.TRANSLATOR
        assert session.screen is Screen.TRANSLATOR

    def test_go_home_discards_text(self, session):
        session.start()
        session.set_text("hi")

        snapshot = session.go_home()

        assert snapshot.screen is Screen.HOME
        assert session.text == ""
        assert snapshot.is_empty


class TestTextBuffer:
    """Recomputation on text changes."""

    def test_empty_state(self, session):
        snapshot = session.start()

        assert snapshot.is_empty
        assert snapshot.result.words == ()
        assert snapshot.cards == ()
        assert snapshot.show_hero is False

    def test_set_text_recomputes(self, session):
        session.start()

        snapshot = session.set_text("Hi there")

        assert snapshot.text == "Hi there"
        assert snapshot.result.to_lists() == [["H", "i"], ["t", "h", "e", "r", "e"]]
        assert [[s.label for s in group] for group in snapshot.cards] == [
            ["H", "I"],
            ["T", "H", "E", "R", "E"],
        ]

    def test_hero_is_latest_letter(self, session):
        snapshot = session.set_text("hi!")

        assert snapshot.show_hero
        assert snapshot.hero.character == "i"
        assert snapshot.hero.found

    def test_hero_placeholder(self, session):
        snapshot = session.set_text("hz")

        assert snapshot.hero.character == "z"
        assert snapshot.hero.is_placeholder

    def test_no_hero_without_letters(self, session):
        snapshot = session.set_text("?!")

        assert snapshot.hero is None
        assert snapshot.show_hero is False
        assert not snapshot.is_empty
        assert snapshot.result.to_lists() == [[]]

    def test_most_recent_value_wins(self, session):
        session.set_text("abc")
        snapshot = session.set_text("x")

        assert snapshot.result.to_lists() == [["x"]]
        assert session.snapshot is snapshot

    def test_clear(self, session):
        session.set_text("hello")

        snapshot = session.clear()

        assert snapshot.is_empty
        assert session.text == ""

    def test_truncates_long_input(self, session, caplog):
        with caplog.at_level(logging.WARNING, logger="gesturio"):
            snapshot = session.set_text("a" * 25)

        assert len(snapshot.text) == 20
        assert "truncated" in caplog.text


class TestSubscriptions:
    """Observer notifications."""

    def test_subscribe_receives_current_snapshot(self, session):
        received: list[SessionSnapshot] = []

        session.subscribe(received.append)

        assert received == [session.snapshot]

    def test_each_mutation_notifies(self, session):
        received: list[SessionSnapshot] = []
        session.subscribe(received.append)

        session.start()
        session.set_text("h")
        session.set_text("hi")
        session.go_home()

        assert [s.screen for s in received] == [
            Screen.HOME,
            Screen.TRANSLATOR,
            Screen.TRANSLATOR,
            Screen.TRANSLATOR,
            Screen.HOME,
        ]
        assert [s.text for s in received] == ["", "", "h", "hi", ""]

    def test_unsubscribe(self, session):
        received: list[SessionSnapshot] = []
        unsubscribe = session.subscribe(received.append)

        unsubscribe()
        session.set_text("x")

        assert len(received) == 1

    def test_unsubscribe_twice_is_harmless(self, session):
        unsubscribe = session.subscribe(lambda snapshot: None)

        unsubscribe()
        unsubscribe()
