from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from .resolver import resolve_season_range

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/seasons/range", methods=["GET"], endpoint="season_range")
    def season_range():
        try:
            start_month = request.args.get("start_month")
            end_month = request.args.get("end_month")
            year = request.args.get("year")
            if not start_month or not end_month or not year:
                raise ValidationError("Thiếu start_month, end_month hoặc year")
            try:
                year_value = int(year)
            except ValueError:
                raise ValidationError("Năm không hợp lệ") from None
            season = resolve_season_range(start_month, end_month, year_value)
        except ValidationError as e:
            logger.info("season range rejected: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, "start": season.start.isoformat(), "end": season.end.isoformat()})
