from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import occurrence_instant
from ..core.exceptions import ValidationError
from ..container import Container
from .recurrence import build_rule, expand

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/recurrence/preview", methods=["POST"], endpoint="recurrence_preview")
    def recurrence_preview():
        data = request.get_json(silent=True) or {}
        try:
            for field in ("startDate", "endDate", "frequency"):
                if data.get(field) in (None, ""):
                    raise ValidationError(f"Thiếu trường {field}")
            rule = build_rule(
                start_date=data["startDate"],
                end_date=data["endDate"],
                frequency=data["frequency"],
                days_of_week=data.get("daysOfWeek") or (),
            )
            dates = expand(rule, max_occurrences=app.config["MAX_OCCURRENCES"])
        except ValidationError as e:
            logger.info("recurrence preview rejected: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({
            "success": True,
            "count": len(dates),
            "dates": [d.isoformat() for d in dates],
            "instants": [occurrence_instant(d).isoformat() for d in dates],
        })
