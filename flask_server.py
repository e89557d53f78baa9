"""
Flask app exposing the task list API under /api/tasks.
"""

import logging

from taskapp import create_app
from taskapp.config import Config

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app()

if __name__ == '__main__':
    logging.getLogger(__name__).info(f"Server running on port {app.config['PORT']}")
    app.run(
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.config["DEBUG"],
        use_reloader=False,
        threaded=True,
    )
