"""Tests for GeneratorSession state, notifications and clipboard handling."""

import pytest

from pwgen.config import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from pwgen.errors import NO_CLASS_SELECTED_MESSAGE, ClipboardError
from pwgen.session import (
    COPIED_MESSAGE,
    GENERATED_MESSAGE,
    NOTHING_TO_COPY_MESSAGE,
    GeneratorSession,
)


@pytest.fixture
def session(clipboard, notifier):
    return GeneratorSession(clipboard=clipboard, notify=notifier)


def test_defaults(session):
    assert session.length == DEFAULT_LENGTH
    assert session.password == ''
    assert not session.config().any_selected()


@pytest.mark.parametrize('value', [MIN_LENGTH, 12, MAX_LENGTH])
def test_length_accepts_bounds(session, value):
    session.length = value
    assert session.length == value


@pytest.mark.parametrize('value', [MIN_LENGTH - 1, MAX_LENGTH + 1, 0, '12', 10.0, True])
def test_length_rejects_invalid_values(session, value):
    with pytest.raises(ValueError):
        session.length = value
    assert session.length == DEFAULT_LENGTH


def test_set_option_unknown_name(session):
    with pytest.raises(KeyError):
        session.set_option('emoji', True)


def test_toggle_order_does_not_change_config(clipboard, notifier):
    first = GeneratorSession(clipboard=clipboard, notify=notifier)
    first.set_option('symbols', True)
    first.set_option('numbers', True)

    second = GeneratorSession(clipboard=clipboard, notify=notifier)
    second.set_option('numbers', True)
    second.set_option('symbols', True)

    assert first.config() == second.config()


def test_toggle_option_flips_state(session):
    assert session.toggle_option('lower') is True
    assert session.toggle_option('lower') is False


def test_generate_without_classes_notifies_error(session, notifier):
    assert session.generate() is None
    assert session.password == ''
    assert notifier.last.is_error
    assert notifier.last.message == NO_CLASS_SELECTED_MESSAGE


def test_generate_failure_keeps_previous_password(session):
    session.set_option('upper', True)
    previous = session.generate()
    session.set_option('upper', False)

    assert session.generate() is None
    assert session.password == previous


def test_generate_stores_password_and_notifies(session, notifier):
    session.set_option('numbers', True)
    session.length = 8

    password = session.generate()

    assert password is not None
    assert len(password) == 8
    assert password.isdigit()
    assert session.password == password
    assert notifier.last.message == GENERATED_MESSAGE
    assert not notifier.last.is_error


def test_copy_without_password(session, clipboard, notifier):
    assert session.copy_to_clipboard() is False
    assert clipboard.contents == []
    assert notifier.last.message == NOTHING_TO_COPY_MESSAGE
    assert notifier.last.is_error


def test_copy_writes_clipboard(session, clipboard, notifier):
    session.set_option('lower', True)
    password = session.generate()

    assert session.copy_to_clipboard() is True
    assert clipboard.contents == [password]
    assert notifier.last.message == COPIED_MESSAGE


def test_copy_reports_clipboard_failure(notifier):
    def broken_clipboard(text):
        raise ClipboardError('Clipboard unavailable: no backend')

    session = GeneratorSession(clipboard=broken_clipboard, notify=notifier)
    session.set_option('upper', True)
    session.generate()

    assert session.copy_to_clipboard() is False
    assert notifier.last.is_error
    assert 'Clipboard unavailable' in notifier.last.message


def test_session_uses_injected_random_source(clipboard, notifier, scripted_random):
    rng = scripted_random([1] * 8)
    session = GeneratorSession(clipboard=clipboard, notify=notifier, rng=rng)
    session.set_option('numbers', True)
    session.length = 8

    assert session.generate() == '1' * 8
