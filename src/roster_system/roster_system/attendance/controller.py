from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.request_args import arg_date, arg_int, json_object
from ..common.serializers import to_jsonable
from ..core.enums import ErrorCode
from ..core.exceptions import ValidationError
from .model import AttendanceInput


def _parse_inputs(raw: object) -> dict[int, AttendanceInput]:
    """Accept ``{"<player_id>": {...}}`` or ``[{"player_id": ..., ...}]``."""

    if isinstance(raw, dict):
        items = [{"player_id": k, **json_object(v, "attendance")} for k, v in raw.items()]
    elif isinstance(raw, list):
        items = [json_object(item, "attendance") for item in raw]
    else:
        raise ValidationError("attendance must be an object or a list", {"attendance": ErrorCode.INVALID_VALUE})

    inputs: dict[int, AttendanceInput] = {}
    for item in items:
        player_id = arg_int(item, "player_id", required=True)
        inputs[player_id] = AttendanceInput(status=item.get("status"), notes=item.get("notes"))
    return inputs


def register(app: Flask, container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/sheet", methods=["GET"], endpoint="attendance_sheet")
    def attendance_sheet():
        team_id = arg_int(request.args, "team_id", required=True)
        event_date = arg_date(request.args, "event_date", required=True)
        return jsonify(to_jsonable(service.load_sheet(team_id, event_date)))

    @app.route("/api/attendance/save", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        body = json_object(request.get_json(silent=True))
        team_id = arg_int(body, "team_id", required=True)
        event_date = arg_date(body, "event_date", required=True)
        inputs = _parse_inputs(body.get("attendance") or {})

        result = service.save(team_id, event_date, inputs)
        payload = {
            "success": result.ok,
            "succeeded": [op.player_id for op in result.succeeded],
            "failed": [{"player_id": f.player_id, "message": f.message} for f in result.failed],
        }
        # Some writes may have landed; the client retries only the failed players.
        return jsonify(payload), (200 if result.ok else 207)
