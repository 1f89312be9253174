from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_day_count
from ..core.constants import MAX_RANGE_DAYS
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"success": False, "message": "Login required"}), 401
            return view(*args, **kwargs)

        return wrapper

    def _parse_start(value):
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError("start must be YYYY-MM-DD")

    @app.route("/api/me/week", methods=["GET"], endpoint="api_my_week")
    @login_required
    def api_my_week():
        """Week overview for the logged-in user: one status per day."""
        try:
            start = _parse_start(request.args.get("start"))
            days = require_day_count(
                request.args.get("days"),
                "days",
                default=app.config.get("WEEK_DAYS", 7),
                max_days=MAX_RANGE_DAYS,
            )
            org_id = request.args.get("org_id") or session.get("org_id")

            overview = container.week_status_service.get_week(
                user_id=str(session["user_id"]),
                org_id=org_id,
                start_day=start,
                day_count=days,
            )
            return jsonify({"success": True, "data": overview.to_dict()}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("week overview failed user=%s", session.get("user_id"))
            return jsonify({"success": False, "message": "Could not load the week overview"}), 500
