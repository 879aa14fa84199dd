"""Tests for the onboarding/list screen selector."""

from codelab.app.state import AppState


def test_starts_on_onboarding():
    state = AppState()
    assert state.show_onboarding is True
    assert state.onboarding_visible.value is True


def test_continue_shows_list():
    state = AppState()
    state.on_continue()
    assert state.show_onboarding is False


def test_continue_is_idempotent():
    state = AppState()
    for _ in range(5):
        state.on_continue()
        assert state.show_onboarding is False


def test_no_way_back_to_onboarding():
    state = AppState()
    state.on_continue()
    state.on_continue()
    state.dispose()
    state.on_continue()
    assert state.show_onboarding is False


def test_observers_notified_once(recorder):
    state = AppState()
    state.onboarding_visible.listen(recorder)

    state.on_continue()
    state.on_continue()

    assert recorder.calls == 1


def test_disposed_state_ignores_continue(recorder):
    state = AppState()
    state.onboarding_visible.listen(recorder)
    state.dispose()

    state.on_continue()

    assert state.disposed is True
    assert state.show_onboarding is True
    assert recorder.calls == 0


def test_restored_list_state():
    state = AppState(onboarding_visible=False)
    assert state.show_onboarding is False
