# session_state.py
"""
Per-client dashboard state.

All UI flags for one connected client (login, active tab, notification,
alerts panel and critical modal) live in a DashboardSession and change only
through its transition methods.
"""
from threading import Lock

TABS = ("dashboard", "heatmap", "reports")
NOTIFICATION_KINDS = ("warning", "info")

CONTAMINATION_ALERT_MESSAGE = "Alert: A high contamination area has been identified near your active sector."


class SessionStateError(Exception):
    """Raised when a transition is not allowed from the current state."""


class DashboardSession:
    def __init__(self):
        self._lock = Lock()
        self.logged_in = False
        self.active_tab = None
        self.notification = None
        self.show_alerts = False
        self.show_critical_modal = False
        self.assessment = None

    # --- Login lifecycle ---

    def login(self):
        with self._lock:
            if self.logged_in:
                raise SessionStateError("Session is already logged in.")
            self.logged_in = True
            self.active_tab = "dashboard"

    def logout(self):
        with self._lock:
            self.logged_in = False
            self.active_tab = None
            self.notification = None
            self.show_alerts = False
            self.show_critical_modal = False
            self.assessment = None

    def select_tab(self, tab):
        with self._lock:
            self._require_login()
            if tab not in TABS:
                raise SessionStateError(f"Unknown tab '{tab}'. Expected one of {TABS}.")
            self.active_tab = tab

    # --- Notifications ---

    def set_notification(self, message, kind="warning", only_if_empty=False):
        """
        Shows a notification. With only_if_empty, an existing notification is kept.
        Returns True if the notification changed.
        """
        with self._lock:
            self._require_login()
            return self._set_notification(message, kind, only_if_empty)

    def clear_notification(self):
        with self._lock:
            self.notification = None
            self.show_alerts = False

    def apply_assessment(self, assessment):
        """
        Records the latest advisory. Risk or Unsafe water raises an area-scan
        notification (unless one is already showing), and Unsafe water also
        opens the critical modal.
        """
        with self._lock:
            self._require_login()
            self.assessment = assessment
            score = assessment.get("score")
            if score in ("Risk", "Unsafe"):
                self._set_notification(f"Area Scan: {score} water detected locally.", "warning", True)
            if score == "Unsafe":
                self.show_critical_modal = True

    def dismiss_critical(self):
        with self._lock:
            self.show_critical_modal = False

    def raise_contamination_alert(self):
        with self._lock:
            self._require_login()
            self._set_notification(CONTAMINATION_ALERT_MESSAGE, "warning", False)
            self.show_alerts = True

    def snapshot(self):
        """A JSON-friendly copy of the current state."""
        with self._lock:
            return {
                "logged_in": self.logged_in,
                "active_tab": self.active_tab,
                "notification": dict(self.notification) if self.notification else None,
                "show_alerts": self.show_alerts,
                "show_critical_modal": self.show_critical_modal,
                "assessment": self.assessment,
            }

    # --- Helpers (caller holds the lock) ---

    def _require_login(self):
        if not self.logged_in:
            raise SessionStateError("Session is not logged in.")

    def _set_notification(self, message, kind, only_if_empty):
        if kind not in NOTIFICATION_KINDS:
            raise SessionStateError(f"Unknown notification kind '{kind}'.")
        if only_if_empty and self.notification is not None:
            return False
        self.notification = {"message": message, "type": kind}
        return True
