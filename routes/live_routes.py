# routes/live_routes.py
"""
Socket.IO handlers for live dashboard sessions.

Each logged-in client gets a DashboardSession plus a SessionScheduler that
owns its timers: the advisory (once right away, then periodically), the
one-time contamination alert and the synthetic drift of the heatmap layer.
Logging out or disconnecting cancels them together.
"""
import threading

from flask import current_app, request
from flask_socketio import emit

import alerter
from analysis import build_heat_points
from background_tasks import SessionScheduler
from dashboard import build_local_view, parse_origin
from database import get_recent_reports
from extensions import socketio
from llm_analyzer import resolve_blocking
from sensor_simulator import perturb
from session_state import DashboardSession, SessionStateError

_live_sessions = {}
_sessions_lock = threading.Lock()


class LiveSession:
    """Everything one connected client owns while logged in."""

    def __init__(self, sid, origin, view, heat_readings, advisory_timeout):
        self.sid = sid
        self.origin = origin
        self.view = view
        self.heat_readings = heat_readings
        self.advisory_timeout = advisory_timeout
        self.state = DashboardSession()
        self.scheduler = SessionScheduler(owner=sid)

    def refresh_advisory(self):
        """Resolves the advisory for the latest local reading and pushes it to the client."""
        latest_tds = self.view["latest_tds"]
        if latest_tds is None or not self.state.logged_in:
            return
        reports = get_recent_reports()
        assessment = resolve_blocking(latest_tds, reports, timeout=self.advisory_timeout)
        if not self.state.logged_in:
            return
        alerter.deliver_assessment(self.sid, self.state, assessment)

    def raise_contamination_alert(self):
        alerter.send_contamination_alert(self.sid, self.state)

    def drift(self):
        self.heat_readings = perturb(self.heat_readings)
        socketio.emit('heatmap_update', {"points": build_heat_points(self.heat_readings)}, to=self.sid)


def get_live_session(sid):
    with _sessions_lock:
        return _live_sessions.get(sid)


def end_session(sid):
    """Cancels a client's timers and forgets its state. Returns True if a session existed."""
    with _sessions_lock:
        live = _live_sessions.pop(sid, None)
    if live is None:
        return False
    live.scheduler.cancel_all()
    live.state.logout()
    print(f"LIVE: Session for client {sid} ended.")
    return True


@socketio.on('connect')
def handle_connect(auth=None):
    emit('tdsUpdate', current_app.config.get('LATEST_TDS') or {"tds": 0})


@socketio.on('login')
def handle_login(data=None):
    """
    Starts a dashboard session. `data` may carry the client's {lat, lng};
    without it the fallback region is shown.

    The baseline assessment is sent right away; the AI advisory follows
    from a background task when it is ready.
    """
    sid = request.sid
    data = data or {}
    if get_live_session(sid) is not None:
        emit('session_error', {"error": "Session is already logged in."})
        return

    try:
        origin = parse_origin(data.get('lat'), data.get('lng'))
    except (TypeError, ValueError):
        origin = None

    config = current_app.config
    view = build_local_view(config['READING_CORPUS'], origin)
    live = LiveSession(
        sid, origin, view,
        heat_readings=list(config['HEATMAP_CORPUS']),
        advisory_timeout=config['ADVISORY_TIMEOUT_SECONDS'],
    )
    live.state.login()

    with _sessions_lock:
        _live_sessions[sid] = live

    emit('dashboard_update', {
        "view": view,
        "assessment": view["baseline"],
        "state": live.state.snapshot(),
    })

    # The first advisory runs right away but is still owned by the scheduler,
    # so logging out before it finishes discards it.
    live.scheduler.add('initial_advisory', 0, live.refresh_advisory, repeat=False)
    live.scheduler.add('refresh', config['REFRESH_INTERVAL_SECONDS'], live.refresh_advisory)
    live.scheduler.add('contamination_alert', config['CONTAMINATION_ALERT_DELAY_SECONDS'],
                       live.raise_contamination_alert, repeat=False)
    live.scheduler.add('drift', config['DRIFT_INTERVAL_SECONDS'], live.drift)
    live.scheduler.start_all()

    print(f"LIVE: Client {sid} logged in ({'fallback region' if origin is None else origin}).")


@socketio.on('select_tab')
def handle_select_tab(data):
    live = get_live_session(request.sid)
    if live is None:
        emit('session_error', {"error": "Session is not logged in."})
        return
    try:
        live.state.select_tab((data or {}).get('tab'))
    except SessionStateError as e:
        emit('session_error', {"error": str(e)})
        return
    emit('session_state', live.state.snapshot())


@socketio.on('dismiss_alert')
def handle_dismiss_alert(data=None):
    live = get_live_session(request.sid)
    if live is None:
        return
    if (data or {}).get('critical'):
        live.state.dismiss_critical()
    else:
        live.state.clear_notification()
    emit('session_state', live.state.snapshot())


@socketio.on('logout')
def handle_logout():
    end_session(request.sid)
    emit('session_state', DashboardSession().snapshot())


@socketio.on('disconnect')
def handle_disconnect(*args):
    end_session(request.sid)
