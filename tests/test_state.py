from weatherapp.core.state import DisplayState


def test_starts_in_day():
    assert DisplayState().is_night is False


def test_even_number_of_toggles_restores_flag():
    for start in (False, True):
        state = DisplayState(is_night=start)
        for n in (2, 4, 10):
            for _ in range(n):
                state.toggle()
            assert state.is_night is start


def test_toggle_notifies_after_flip():
    state = DisplayState()
    seen = []
    state.subscribe(lambda s: seen.append(s.is_night))
    assert state.toggle() is True
    state.toggle()
    assert seen == [True, False]


def test_unsubscribe():
    state = DisplayState()
    seen = []
    unsubscribe = state.subscribe(lambda s: seen.append(s.is_night))
    unsubscribe()
    unsubscribe()
    state.toggle()
    assert seen == []
