import pytest

from advent.toggle import Toggle


def make_toggle(said: list[str], state: bool = False) -> Toggle:
    return Toggle(state, "Now on.", "Now off.", "Already on.", "Already off.", say=said.append)


def test_each_transition_prints_its_message():
    said: list[str] = []
    toggle = make_toggle(said)

    toggle.turn_on()
    toggle.turn_on()
    toggle.turn_off()
    toggle.turn_off()

    assert said == ["Now on.", "Already on.", "Now off.", "Already off."]
    assert toggle.is_on is False


def test_set_changes_state_only_on_transition():
    said: list[str] = []
    toggle = make_toggle(said, state=True)

    toggle.set(True)
    assert toggle.is_on
    toggle.set(False)
    assert not toggle.is_on
    assert said == ["Already on.", "Now off."]


def test_state_is_read_only():
    toggle = make_toggle([])
    with pytest.raises(AttributeError):
        toggle.is_on = True  # type: ignore[misc]
