from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_as_of
from ..common.serialization import to_jsonable
from ..common.validators import require_positive_int
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def bad_request(e: ValidationError):
        logger.info("%s rejected: %s", request.path, e)
        return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/teams/<team_id>/attendance", methods=["GET"], endpoint="team_attendance")
    def team_attendance(team_id: str):
        try:
            result = service.team_attendance(team_id=team_id, now=parse_as_of(request.args.get("asOf")))
        except ValidationError as e:
            return bad_request(e)
        return jsonify({"success": True, "data": to_jsonable(result)})

    @app.route("/api/teams/<team_id>/members/<user_id>/stats", methods=["GET"], endpoint="member_stats")
    def member_stats(team_id: str, user_id: str):
        try:
            stats = service.member_stats(user_id=user_id, team_id=team_id, now=parse_as_of(request.args.get("asOf")))
        except ValidationError as e:
            return bad_request(e)
        return jsonify({"success": True, "data": to_jsonable(stats)})

    @app.route("/api/teams/<team_id>/leaderboard", methods=["GET"], endpoint="team_leaderboard")
    def team_leaderboard(team_id: str):
        try:
            limit = request.args.get("limit")
            rows = service.team_leaderboard(
                team_id=team_id,
                now=parse_as_of(request.args.get("asOf")),
                limit=require_positive_int(limit, "limit") if limit else app.config["LEADERBOARD_LIMIT"],
            )
        except ValidationError as e:
            return bad_request(e)
        return jsonify({"success": True, "data": to_jsonable(rows)})

    @app.route("/api/teams/<team_id>/trends", methods=["GET"], endpoint="team_trends")
    def team_trends(team_id: str):
        try:
            team = container.repos.teams.get_by_id(team_id)
            if not team:
                raise ValidationError("Đội không tồn tại")
            trends = service.attendance_trends(
                organization_id=team.organization_id,
                team_id=team_id,
                now=parse_as_of(request.args.get("asOf")),
            )
        except ValidationError as e:
            return bad_request(e)
        return jsonify({"success": True, "data": to_jsonable(trends)})
