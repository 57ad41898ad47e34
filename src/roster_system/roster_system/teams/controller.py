from __future__ import annotations

from flask import Flask, jsonify

from ..common.serializers import to_jsonable


def register(app: Flask, container) -> None:
    @app.route("/api/teams", methods=["GET"], endpoint="teams_list")
    def teams_list():
        return jsonify({"teams": to_jsonable(list(container.teams_repo.list_all()))})
