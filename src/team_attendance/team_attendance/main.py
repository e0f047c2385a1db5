from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module, load_settings

from .container import Repositories, build_container
from .core.constants import (
    DEFAULT_LEADERBOARD_LIMIT,
    DEFAULT_UPCOMING_EVENT_DAYS,
    DEFAULT_UPCOMING_EVENT_LIMIT,
    MAX_OCCURRENCES,
)
from .logging_config import setup_logging
from .attendance.controller import register as register_attendance
from .events.controller import register as register_events
from .gamification.controller import register as register_gamification
from .seasons.controller import register as register_seasons

logger = logging.getLogger(__name__)


def create_app(repositories: Repositories, *, env: Optional[str] = None) -> Flask:
    """JSON facade over the engine; storage adapters come from the caller."""
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module(env)
    settings = load_settings(env)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_OCCURRENCES"] = int(getattr(settings, "MAX_OCCURRENCES", MAX_OCCURRENCES))
    app.config["LEADERBOARD_LIMIT"] = int(getattr(settings, "LEADERBOARD_LIMIT", DEFAULT_LEADERBOARD_LIMIT))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), request_log=app.config["DEBUG"])
    logger.info("team-attendance settings=%s", settings_module)

    container = build_container(
        repositories,
        max_occurrences=app.config["MAX_OCCURRENCES"],
        leaderboard_limit=app.config["LEADERBOARD_LIMIT"],
        upcoming_event_days=int(getattr(settings, "UPCOMING_EVENT_DAYS", DEFAULT_UPCOMING_EVENT_DAYS)),
        upcoming_event_limit=int(getattr(settings, "UPCOMING_EVENT_LIMIT", DEFAULT_UPCOMING_EVENT_LIMIT)),
    )
    app.extensions["team_attendance"] = container

    @app.errorhandler(Exception)
    def unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("unhandled error")
        return jsonify({"success": False, "message": "Lỗi hệ thống, vui lòng thử lại sau"}), 500

    register_seasons(app, container)
    register_events(app, container)
    register_attendance(app, container)
    register_gamification(app, container)

    return app
