import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from woodbot.errors import PrefixLockPoisoned
from woodbot.state import BotData, PrefixState


def test_fresh_state_has_no_prefix():
    assert PrefixState().get_prefix() is None
    assert BotData().prefix.get_prefix() is None


def test_set_then_get():
    state = PrefixState()
    state.set_prefix("my_prefix")
    assert state.get_prefix() == "my_prefix"


def test_last_sequential_write_wins():
    state = PrefixState()
    for value in ["a", "bb", "!", "?", "final"]:
        state.set_prefix(value)
    assert state.get_prefix() == "final"


def test_setting_same_value_twice():
    state = PrefixState()
    state.set_prefix("$")
    state.set_prefix("$")
    assert state.get_prefix() == "$"


@pytest.mark.parametrize("value", ["", "   ", "x" * 500])
def test_values_stored_verbatim(value):
    state = PrefixState()
    state.set_prefix(value)
    assert state.get_prefix() == value


def test_each_bot_data_has_its_own_state():
    first, second = BotData(), BotData()
    first.prefix.set_prefix("!")
    assert second.prefix.get_prefix() is None


def test_concurrent_writers_leave_one_written_value():
    state = PrefixState()
    values = [f"prefix-{i}" * (i + 1) for i in range(16)]
    barrier = threading.Barrier(len(values))

    def write(value):
        barrier.wait()
        for _ in range(200):
            state.set_prefix(value)
            assert state.get_prefix() in values

    with ThreadPoolExecutor(max_workers=len(values)) as pool:
        list(pool.map(write, values))

    assert state.get_prefix() in values


def test_failure_inside_lock_poisons_state():
    state = PrefixState("!")
    with pytest.raises(RuntimeError):
        with state._guard():
            raise RuntimeError("boom")

    assert state.poisoned
    with pytest.raises(PrefixLockPoisoned):
        state.get_prefix()
    with pytest.raises(PrefixLockPoisoned):
        state.set_prefix("?")
