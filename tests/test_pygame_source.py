import pygame
import pytest

from gamepad_dash.controllers.keyboard import KEYBOARD_INDEX, KeyboardGamepad
from gamepad_dash.controllers.pygame_source import PygameInputSource
from gamepad_dash.controllers.types import GamepadState, StickVector

from conftest import FakePad, claim


class EventFeed:
    def __init__(self):
        self.pending = []

    def push(self, *events):
        self.pending.extend(events)

    def __call__(self):
        out, self.pending = self.pending, []
        return out


def added(device_index):
    return pygame.event.Event(pygame.JOYDEVICEADDED, device_index=device_index)


def removed(instance_id):
    return pygame.event.Event(pygame.JOYDEVICEREMOVED, instance_id=instance_id)


@pytest.fixture
def feed():
    return EventFeed()


@pytest.fixture
def opened():
    return {}


@pytest.fixture
def source(feed, opened):
    def factory(device_index):
        # instance id == device index for these fakes
        pad = FakePad(device_index + 1, GamepadState())
        opened[device_index] = pad
        return pad

    return PygameInputSource(factory, keyboard=KeyboardGamepad(), events=feed)


def test_keyboard_pad_is_present_from_the_start(source):
    assert list(source.pairs.pads) == [KEYBOARD_INDEX]


def test_pad_plugged_in_later_is_picked_up(source, feed, opened):
    assert source.read_pair() is None

    feed.push(added(0))
    source.read_pair()

    assert 1 in source.pairs.pads
    opened[0].state = claim("b")
    feed.push(
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
    )
    assert source.read_pair() is not None
    assert (source.pairs.assignments.gamepad1, source.pairs.assignments.gamepad2) == (KEYBOARD_INDEX, 1)


def test_unplugged_pad_is_dropped_and_frees_its_slot(source, feed, opened):
    feed.push(added(0), added(1))
    source.read_pair()
    opened[0].state = claim("a")
    opened[1].state = claim("b")
    assert source.read_pair() is not None

    feed.push(removed(1))
    assert source.read_pair() is None
    assert 2 not in source.pairs.pads
    assert source.pairs.assignments.gamepad2 == -1


def test_replugged_pad_can_claim_again(source, feed, opened):
    feed.push(added(0), added(1))
    source.read_pair()
    opened[0].state = claim("a")
    opened[1].state = claim("b")
    source.read_pair()

    feed.push(removed(1))
    source.read_pair()

    feed.push(added(1))
    source.read_pair()
    opened[1].state = GamepadState(start=True, b=True, left_stick=StickVector(0.5, 0.0))

    assert source.read_pair() == (StickVector(0.0, 0.0), StickVector(0.5, 0.0))


def test_pad_vanishing_while_opening_is_skipped(feed, capsys):
    def factory(device_index):
        raise RuntimeError("No controller found. Is it on and connected?")

    source = PygameInputSource(factory, events=feed)
    feed.push(added(3))

    assert source.read_pair() is None
    assert source.pairs.pads == {}
    assert "[warn]" in capsys.readouterr().out


def test_window_close_stops_like_ctrl_c(source, feed):
    feed.push(pygame.event.Event(pygame.QUIT))
    with pytest.raises(KeyboardInterrupt):
        source.read_pair()


def test_key_events_are_ignored_without_keyboard_pad(feed):
    source = PygameInputSource(lambda i: FakePad(i + 1), events=feed)
    feed.push(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
    assert source.read_pair() is None
    assert source.pairs.pads == {}
