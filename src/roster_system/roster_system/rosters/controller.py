from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.request_args import arg_date, arg_int, json_object
from ..common.serializers import to_jsonable
from .model import RosterCandidate


def register(app: Flask, container) -> None:
    service = container.roster_service

    @app.route("/api/rosters", methods=["GET"], endpoint="rosters_list")
    def rosters_list():
        team_id = arg_int(request.args, "team_id", required=True)
        if request.args.get("include_inactive") in {"1", "true"}:
            entries = service.list_entries(team_id)
        else:
            entries = service.list_active(team_id)
        return jsonify({"roster_entries": to_jsonable(list(entries))})

    @app.route("/api/rosters/available", methods=["GET"], endpoint="rosters_available")
    def rosters_available():
        team_id = arg_int(request.args, "team_id", required=True)
        return jsonify({"players": to_jsonable(service.available_players(team_id))})

    @app.route("/api/rosters", methods=["POST"], endpoint="rosters_add")
    def rosters_add():
        body = json_object(request.get_json(silent=True))
        team_id = arg_int(body, "team_id", required=True)
        candidate = RosterCandidate(
            player_id=arg_int(body, "player_id"),
            start_date=arg_date(body, "start_date"),
            jersey_number=body.get("jersey_number"),
            position=body.get("position"),
        )
        entry_id = service.add_player(team_id, candidate)
        return jsonify({"success": True, "message": "Player added to roster successfully", "roster_entry_id": entry_id}), 201

    @app.route("/api/rosters/<int:entry_id>", methods=["PUT"], endpoint="rosters_edit")
    def rosters_edit(entry_id: int):
        body = json_object(request.get_json(silent=True))
        service.edit_entry(entry_id, jersey_number=body.get("jersey_number"), position=body.get("position"))
        return jsonify({"success": True, "message": "Roster entry updated successfully"})

    @app.route("/api/rosters/<int:entry_id>", methods=["DELETE"], endpoint="rosters_remove")
    def rosters_remove(entry_id: int):
        service.remove_player(entry_id)
        return jsonify({"success": True, "message": "Player removed from roster successfully"})
