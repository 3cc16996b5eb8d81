# background_tasks.py
"""
Timer-driven work owned by a dashboard session.

Every task has an explicit start()/cancel() pair, and a SessionScheduler
cancels all of a session's tasks together when the session ends.
"""
import threading


class ScheduledTask:
    """
    Runs `func` every `interval` seconds on a daemon thread, or once after
    `interval` seconds when repeat=False. cancel() never waits: a call that
    is already running finishes, but `func` is not started again.
    """

    def __init__(self, name, interval, func, repeat=True):
        self.name = name
        self.interval = interval
        self.func = func
        self.repeat = repeat
        self._stop_event = threading.Event()
        self._thread = None

    @property
    def is_running(self):
        return self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set()

    def start(self):
        if self._thread is not None:
            raise RuntimeError(f"Task '{self.name}' has already been started.")
        self._thread = threading.Thread(target=self._run, name=f"task-{self.name}", daemon=True)
        self._thread.start()

    def cancel(self):
        self._stop_event.set()

    def _run(self):
        while not self._stop_event.wait(self.interval):
            try:
                self.func()
            except Exception as e:
                print(f"BACKGROUND ERROR in task '{self.name}': {e}")
            if not self.repeat or self._stop_event.is_set():
                break


class SessionScheduler:
    """Owns the scheduled tasks of one session."""

    def __init__(self, owner=None):
        self.owner = owner
        self.tasks = {}
        self._lock = threading.Lock()
        self._cancelled = False

    def add(self, name, interval, func, repeat=True):
        with self._lock:
            if self._cancelled:
                raise RuntimeError("Cannot add tasks to a cancelled scheduler.")
            if name in self.tasks:
                raise ValueError(f"A task named '{name}' is already scheduled.")
            task = ScheduledTask(name, interval, func, repeat=repeat)
            self.tasks[name] = task
            return task

    def start_all(self):
        with self._lock:
            for task in self.tasks.values():
                if task._thread is None:
                    task.start()
        print(f"BACKGROUND: Started {len(self.tasks)} task(s) for session {self.owner}.")

    def cancel_all(self):
        with self._lock:
            self._cancelled = True
            tasks = list(self.tasks.values())
        for task in tasks:
            task.cancel()
        print(f"BACKGROUND: Cancelled {len(tasks)} task(s) for session {self.owner}.")
