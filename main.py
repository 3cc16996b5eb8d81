# main.py
import os

from app import create_app
from background_tasks import ScheduledTask
from config import PORT
from extensions import socketio
from sensor_simulator import push_simulated_reading

# Set SIMULATE_SENSOR=1 to post a random reading to the ingestion endpoint every few seconds.
SIMULATE_SENSOR = os.getenv("SIMULATE_SENSOR", "false").lower() in ("1", "true", "yes")
SIMULATE_INTERVAL_SECONDS = float(os.getenv("SIMULATE_INTERVAL_SECONDS", 10))


def start_sensor_simulation(port):
    base_url = f"http://127.0.0.1:{port}"
    task = ScheduledTask("sensor-simulator", SIMULATE_INTERVAL_SECONDS,
                         lambda: push_simulated_reading(base_url))
    task.start()
    print(f"Sensor simulation posting to {base_url} every {SIMULATE_INTERVAL_SECONDS}s.")
    return task


if __name__ == "__main__":
    print("Initializing Jal-Drishti...")
    app = create_app()
    print("Database setup complete.")

    simulator = start_sensor_simulation(PORT) if SIMULATE_SENSOR else None
    try:
        print(f"Jal-Drishti server running on http://0.0.0.0:{PORT}")
        socketio.run(app, host="0.0.0.0", port=PORT, allow_unsafe_werkzeug=True)
    except KeyboardInterrupt:
        print("\nShutdown signal received. Cleaning up...")
    finally:
        if simulator:
            simulator.cancel()
