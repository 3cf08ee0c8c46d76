import threading
from itertools import islice

import pytest

from controlfront.core import (
    ControlArea,
    CoreConnection,
    SharedIdGenerator,
    SimpleIdGenerator,
)


def test_simple_generator_starts_at_one():
    generator = SimpleIdGenerator()
    assert list(islice(generator, 3)) == [1, 2, 3]


def test_simple_generator_wraps_at_thousand():
    generator = SimpleIdGenerator()
    ids = list(islice(generator, 1000))
    assert ids[-2] == 999
    assert ids[-1] == 0
    assert next(generator) == 1


def test_simple_generator_is_its_own_iterator():
    generator = SimpleIdGenerator()
    assert iter(generator) is generator


def test_independent_simple_generators_do_not_share_state():
    first = SimpleIdGenerator()
    second = SimpleIdGenerator()
    next(first)
    next(first)
    assert next(second) == 1


def test_shared_generator_matches_simple_sequence():
    shared = SharedIdGenerator()
    simple = SimpleIdGenerator()
    assert list(islice(shared, 50)) == list(islice(simple, 50))


def test_shared_generator_is_its_own_iterator():
    shared = SharedIdGenerator()
    assert iter(shared) is shared


def test_shared_generator_gives_unique_ids_across_threads():
    shared = SharedIdGenerator()
    results: list[list[int]] = [[] for _ in range(4)]

    def take(bucket: list[int]) -> None:
        for _ in range(200):
            bucket.append(next(shared))

    threads = [threading.Thread(target=take, args=(bucket,)) for bucket in results]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    all_ids = sorted(value for bucket in results for value in bucket)
    assert all_ids == list(range(1, 801))
    assert next(shared) == 801


@pytest.mark.parametrize(
    "state, label",
    [
        (CoreConnection.START, "Start"),
        (CoreConnection.FAILURE, "Failure"),
        (CoreConnection.RESET, "Reset"),
        (CoreConnection.IDLE, "Idle"),
    ],
)
def test_core_connection_labels(state, label):
    assert state.label() == label


def test_only_start_is_start():
    assert CoreConnection.START.is_start() is True
    assert CoreConnection.FAILURE.is_start() is False
    assert CoreConnection.RESET.is_start() is False
    assert CoreConnection.IDLE.is_start() is False


def test_only_failure_is_failure():
    assert CoreConnection.FAILURE.is_failure() is True
    assert CoreConnection.START.is_failure() is False
    assert CoreConnection.RESET.is_failure() is False
    assert CoreConnection.IDLE.is_failure() is False


def test_reset_ongoing_for_start_and_reset():
    assert CoreConnection.START.reset_ongoing() is True
    assert CoreConnection.RESET.reset_ongoing() is True
    assert CoreConnection.FAILURE.reset_ongoing() is False
    assert CoreConnection.IDLE.reset_ongoing() is False


def test_only_idle_is_connected():
    assert CoreConnection.IDLE.connected() is True
    assert CoreConnection.START.connected() is False
    assert CoreConnection.FAILURE.connected() is False
    assert CoreConnection.RESET.connected() is False


@pytest.mark.parametrize(
    "state",
    [
        CoreConnection.START,
        CoreConnection.FAILURE,
        CoreConnection.RESET,
        CoreConnection.IDLE,
    ],
)
def test_connected_and_reset_ongoing_are_exclusive(state):
    connected = state.connected()
    ongoing = state.reset_ongoing()
    assert not (connected and ongoing)


def test_control_area_members():
    assert {area.name for area in ControlArea} == {"TABS", "DETAILS"}
    assert ControlArea("tabs") is ControlArea.TABS