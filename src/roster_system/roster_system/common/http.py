from __future__ import annotations

from flask import Flask, jsonify

from ..core.exceptions import DomainError, NotFoundError, ValidationError


def register_error_handlers(app: Flask) -> None:
    """Map domain errors to JSON responses for every controller."""

    @app.errorhandler(ValidationError)
    def _validation_error(exc: ValidationError):
        return jsonify({"success": False, "message": exc.message, "errors": exc.as_dict()}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(exc: NotFoundError):
        return jsonify({"success": False, "message": str(exc)}), 404

    @app.errorhandler(DomainError)
    def _domain_error(exc: DomainError):
        app.logger.warning("Unhandled domain error: %s", exc)
        return jsonify({"success": False, "message": str(exc)}), 502
