import logging
import os

from flask import Flask
from dotenv import load_dotenv

from scorekeeper.course import default_course
from scorekeeper.round_state import RoundState

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _truthy(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _configure_logging(level_name):
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    package_logger = logging.getLogger("scorekeeper")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(handler)


def get_state(app):
    """The RoundState owned by ``app``."""
    return app.extensions["scorekeeper"]


def create_app(test_config=None):
    template_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
    app = Flask(__name__, template_folder=template_dir)

    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev")
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")
    app.config["SEED_DEFAULT_COURSE"] = _truthy(os.getenv("SEED_DEFAULT_COURSE", ""))

    if test_config is not None:
        app.config.update(test_config)

    _configure_logging(app.config["LOG_LEVEL"])

    state = RoundState()
    if app.config["SEED_DEFAULT_COURSE"]:
        state.add_course(default_course())
    app.extensions["scorekeeper"] = state

    from scorekeeper.routes.main import main
    app.register_blueprint(main)

    return app


def run_dev_server(app):
    # One RoundState per app, mutated without locks: serve requests one at a time
    app.run(debug=True, threaded=False)
