import pytest

from notifier import UNSUPPORTED_MESSAGE
from timer_session import (
    ACTIVATED_TITLE, DEACTIVATED_TITLE, REMINDER_TITLE, IDLE_MESSAGE, STOPPED_MESSAGE,
    TimerSession, TkScheduler, interval_phrases,
)
from tests.fakes import FakeBackend

PERIOD = 15 * 60


def test_new_session_is_stopped(make_session) -> None:
    session = make_session()

    assert session.running is False
    assert session.interval_handle is None
    assert session.status_message == IDLE_MESSAGE


def test_start_schedules_and_announces(make_session, backend) -> None:
    session = make_session()
    session.start()

    assert session.running is True
    assert session.interval_handle is not None
    assert backend.shown == [(ACTIVATED_TITLE, "The 15-minute timer has started.")]
    assert session.status_message == "Notifications are active. I will notify you every 15 minutes."


def test_start_twice_keeps_one_schedule(make_session, backend, widget) -> None:
    session = make_session()
    session.start()
    handle = session.interval_handle
    session.start()

    assert session.interval_handle is handle
    assert len(widget.jobs) == 1
    assert backend.titles == [ACTIVATED_TITLE]

    widget.advance(PERIOD)
    assert backend.titles.count(REMINDER_TITLE) == 1


def test_stop_releases_and_announces(make_session, backend, widget) -> None:
    session = make_session()
    session.start()
    session.stop()

    assert session.running is False
    assert session.interval_handle is None
    assert widget.jobs == {}
    assert backend.titles == [ACTIVATED_TITLE, DEACTIVATED_TITLE]
    assert backend.shown[-1][1] == "The 15-minute timer has been stopped."
    assert session.status_message == STOPPED_MESSAGE


def test_stop_when_stopped_is_noop(make_session, backend) -> None:
    session = make_session()
    session.stop()

    assert backend.shown == []
    assert session.running is False
    assert session.status_message == IDLE_MESSAGE


def test_n_periods_give_n_reminders(make_session, backend, widget) -> None:
    session = make_session()
    session.start()

    widget.advance(PERIOD - 1)
    assert REMINDER_TITLE not in backend.titles

    widget.advance(1 + 2 * PERIOD)
    reminders = [b for t, b in backend.shown if t == REMINDER_TITLE]
    assert len(reminders) == 3
    assert reminders[0] == "It has been 15 minutes since you started the timer."
    assert backend.titles.count(ACTIVATED_TITLE) == 1


def test_no_reminders_after_stop(make_session, backend, widget) -> None:
    session = make_session()
    session.start()
    widget.advance(PERIOD)
    session.stop()
    widget.advance(5 * PERIOD)

    assert backend.titles == [ACTIVATED_TITLE, REMINDER_TITLE, DEACTIVATED_TITLE]


def test_restart_after_stop(make_session, backend, widget) -> None:
    session = make_session()
    session.start()
    session.stop()
    session.start()
    widget.advance(2 * PERIOD)

    assert session.running is True
    assert len(widget.jobs) == 1
    assert backend.titles.count(REMINDER_TITLE) == 2


def test_teardown_cancels_silently(make_session, backend, widget) -> None:
    session = make_session()
    session.start()
    status = session.status_message
    session.teardown()
    widget.advance(3 * PERIOD)

    assert session.interval_handle is None
    assert session.running is False
    assert session.status_message == status
    assert backend.titles == [ACTIVATED_TITLE]


def test_teardown_twice_and_when_stopped(make_session, backend) -> None:
    session = make_session()
    session.teardown()
    session.start()
    session.teardown()
    session.teardown()

    assert backend.titles == [ACTIVATED_TITLE]


def test_context_manager_releases_on_error(make_session, backend, widget) -> None:
    session = make_session()
    with pytest.raises(RuntimeError):
        with session:
            session.start()
            raise RuntimeError("boom")
    widget.advance(PERIOD)

    assert session.interval_handle is None
    assert REMINDER_TITLE not in backend.titles


def test_denied_still_runs_but_delivers_nothing(make_session, backend, widget, prompt) -> None:
    session = make_session(permission="denied")
    session.start()
    widget.advance(2 * PERIOD)

    assert session.running is True
    assert session.interval_handle is not None
    assert backend.shown == []
    assert prompt.asked == 0


def test_default_permission_prompts_once(make_session, backend, prompt) -> None:
    session = make_session(permission="default")
    session.start()

    assert prompt.asked == 1
    assert backend.shown == []

    prompt.answer(True)
    assert backend.titles == [ACTIVATED_TITLE]
    assert session.notifier.permission == "granted"


def test_stop_during_prompt_keeps_pending_notice(make_session, backend, prompt) -> None:
    session = make_session(permission="default")
    session.start()
    session.stop()
    prompt.answer(True)

    assert prompt.asked == 1
    assert backend.titles == [ACTIVATED_TITLE, DEACTIVATED_TITLE]


def test_unsupported_reports_in_status(make_session, widget, prompt) -> None:
    session = make_session(backend=FakeBackend(supported=False))
    session.start()

    assert session.running is True
    assert session.interval_handle is not None
    assert session.status_message == UNSUPPORTED_MESSAGE
    assert prompt.asked == 0


def test_on_change_fires_on_transitions(make_session) -> None:
    calls = []
    session = make_session(on_change=lambda: calls.append(session.running))
    session.start()
    session.start()
    session.stop()
    session.teardown()

    assert calls == [True, False]


def test_custom_interval_wording(make_session, backend, widget) -> None:
    session = make_session(interval=10)
    session.start()
    widget.advance(10)

    assert session.status_message == "Notifications are active. I will notify you every 10 seconds."
    assert backend.shown == [
        (ACTIVATED_TITLE, "The 10-second timer has started."),
        (REMINDER_TITLE, "It has been 10 seconds since you started the timer."),
    ]


def test_interval_phrases() -> None:
    assert interval_phrases(900) == ("15-minute", "15 minutes")
    assert interval_phrases(60) == ("1-minute", "1 minute")
    assert interval_phrases(10) == ("10-second", "10 seconds")
    assert interval_phrases(90) == ("90-second", "90 seconds")


def test_interval_handle_cancel(widget) -> None:
    fired = []
    handle = TkScheduler(widget).call_every(2, lambda: fired.append(widget.now))
    widget.advance(5)
    handle.cancel()
    handle.cancel()
    widget.advance(10)

    assert fired == [2000, 4000]
    assert handle.active is False
    assert widget.jobs == {}


def test_interval_handle_survives_callback_error(widget) -> None:
    def explode():
        raise ValueError("bad callback")

    handle = TkScheduler(widget).call_every(1, explode)
    with pytest.raises(ValueError):
        widget.advance(1)

    assert handle.active is True
    assert len(widget.jobs) == 1
