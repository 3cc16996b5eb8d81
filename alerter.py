# alerter.py
"""
Pushes live updates to dashboard clients over Socket.IO: new TDS readings,
advisories, notifications and critical alerts.
"""
from extensions import socketio

def broadcast_tds_update(reading):
    """Sends a freshly ingested value to every connected client."""
    payload = {"tds": reading["tds"], "timestamp": reading["timestamp"]}
    socketio.emit('tdsUpdate', payload)
    print(f"INGEST: Broadcast TDS update {payload['tds']}.")
    return payload


def deliver_assessment(sid, session, assessment):
    """
    Applies an advisory to a client's session and emits the result.
    An 'Unsafe' score also emits 'critical_alert'.
    """
    session.apply_assessment(assessment)
    state = session.snapshot()

    socketio.emit('analysis_result', assessment, to=sid)
    socketio.emit('session_state', state, to=sid)
    if state["show_critical_modal"]:
        socketio.emit('critical_alert', {
            "score": assessment.get("score"),
            "tds_level": assessment.get("tds_level"),
            "message": "DO NOT DRINK OPEN WATER. USE CERTIFIED FILTERS ONLY.",
        }, to=sid)
        print(f"ALERT: Critical water advisory sent to client {sid}.")


def send_contamination_alert(sid, session):
    """Raises the delayed contamination notification for a client's session."""
    session.raise_contamination_alert()
    state = session.snapshot()
    socketio.emit('notification', state["notification"], to=sid)
    socketio.emit('session_state', state, to=sid)
    print(f"ALERT: Contamination notice sent to client {sid}.")
