from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.request_args import arg_int
from ..common.serializers import to_jsonable
from ..core.constants import CSV_ENCODING
from ..core.enums import ErrorCode, SortDirection, SortField
from ..core.exceptions import ValidationError
from .model import FilterState


def _parse_filters(args) -> FilterState:
    try:
        return FilterState.from_args(args)
    except ValueError as exc:
        raise ValidationError(f"Invalid report filter: {exc}", {"filters": ErrorCode.INVALID_VALUE}) from None


def _parse_sort(args) -> tuple[SortField, SortDirection]:
    try:
        field = SortField(args.get("sort") or SortField.EVENT_DATE.value)
        direction = SortDirection(args.get("direction") or SortDirection.DESC.value)
    except ValueError as exc:
        raise ValidationError(f"Invalid sort: {exc}", {"sort": ErrorCode.INVALID_VALUE}) from None
    return field, direction


def register(app: Flask, container) -> None:
    service = container.report_service

    def _csv_response(text: str, filename: str):
        return app.response_class(
            text.encode(CSV_ENCODING),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="report_attendance")
    def report_attendance():
        field, direction = _parse_sort(request.args)
        report = service.build_attendance_report(_parse_filters(request.args), sort_field=field, direction=direction)
        return jsonify(
            {
                "attendance_records": to_jsonable(report.rows),
                "stats": to_jsonable(report.stats),
                "sort": {"field": report.sort_field.value, "direction": report.direction.value},
            }
        )

    @app.route("/api/reports/attendance.csv", methods=["GET"], endpoint="report_attendance_csv")
    def report_attendance_csv():
        field, direction = _parse_sort(request.args)
        text = service.export_attendance_csv(_parse_filters(request.args), sort_field=field, direction=direction)
        return _csv_response(text, f"attendance-report-{today_local().isoformat()}.csv")

    @app.route("/api/reports/roster.csv", methods=["GET"], endpoint="report_roster_csv")
    def report_roster_csv():
        team_id = arg_int(request.args, "team_id", required=True)
        text = service.export_roster_csv(team_id)
        return _csv_response(text, f"roster_report_{today_local().strftime('%Y%m%d')}.csv")
