# extensions.py
from flask_socketio import SocketIO

# Created without an app so blueprints and handlers can import it;
# create_app() binds it with socketio.init_app(app).
socketio = SocketIO(cors_allowed_origins="*", async_mode="threading")
