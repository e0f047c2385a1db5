from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.serialization import to_jsonable
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/challenges/<challenge_id>/progress", methods=["GET"], endpoint="challenge_progress")
    def challenge_progress(challenge_id: str):
        service = container.gamification_service
        if service is None:
            return jsonify({"success": False, "message": "Chức năng thử thách chưa được cấu hình"}), 404
        try:
            progress = service.challenge_progress(challenge_id)
        except ValidationError as e:
            logger.info("challenge progress rejected: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({
            "success": True,
            "data": {
                "challenge": to_jsonable(progress.challenge),
                "currentPercent": progress.current_percent,
                "completed": progress.completed,
            },
        })
