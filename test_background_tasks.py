# test_background_tasks.py
import threading
import time

import pytest

from background_tasks import ScheduledTask, SessionScheduler


def test_repeating_task_runs_until_cancelled():
    calls = []
    task = ScheduledTask("tick", 0.01, lambda: calls.append(1))
    task.start()
    time.sleep(0.2)
    task.cancel()
    time.sleep(0.05)
    count = len(calls)
    time.sleep(0.1)

    assert count >= 2
    assert len(calls) == count


def test_one_shot_task_fires_once():
    fired = threading.Event()
    calls = []

    def callback():
        calls.append(1)
        fired.set()

    task = ScheduledTask("once", 0.01, callback, repeat=False)
    task.start()
    assert fired.wait(2)
    time.sleep(0.1)
    assert calls == [1]


def test_cancelled_before_delay_never_fires():
    calls = []
    task = ScheduledTask("alert", 0.2, lambda: calls.append(1), repeat=False)
    task.start()
    task.cancel()
    time.sleep(0.3)
    assert calls == []


def test_task_errors_do_not_stop_the_timer():
    calls = []

    def flaky():
        calls.append(1)
        raise RuntimeError("boom")

    task = ScheduledTask("flaky", 0.01, flaky)
    task.start()
    time.sleep(0.15)
    task.cancel()
    assert len(calls) >= 2


def test_scheduler_cancels_all_tasks_together():
    calls = {"refresh": 0, "drift": 0, "alert": 0}

    def bump(name):
        def callback():
            calls[name] += 1
        return callback

    scheduler = SessionScheduler(owner="test")
    scheduler.add("refresh", 0.01, bump("refresh"))
    scheduler.add("drift", 0.01, bump("drift"))
    scheduler.add("alert", 5, bump("alert"), repeat=False)
    scheduler.start_all()
    time.sleep(0.1)
    scheduler.cancel_all()
    time.sleep(0.05)
    snapshot = dict(calls)
    time.sleep(0.1)

    assert calls == snapshot
    assert calls["alert"] == 0
    assert not any(task.is_running for task in scheduler.tasks.values())
    with pytest.raises(RuntimeError):
        scheduler.add("late", 1, bump("refresh"))


def test_duplicate_task_names_are_rejected():
    scheduler = SessionScheduler()
    scheduler.add("refresh", 1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.add("refresh", 1, lambda: None)


def test_cancel_does_not_wait_for_a_running_call():
    started = threading.Event()
    release = threading.Event()
    calls = []

    def slow_refresh():
        calls.append(1)
        started.set()
        release.wait(5)

    task = ScheduledTask("refresh", 0.01, slow_refresh)
    task.start()
    assert started.wait(2)

    began = time.monotonic()
    task.cancel()
    assert time.monotonic() - began < 0.5

    release.set()
    time.sleep(0.1)
    assert calls == [1]
    assert not task.is_running
