from flask import current_app, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from sharer.domain.exceptions import SharerError, StorageError, ExhaustedRetries


def wants_json():
    return (
        request.path.startswith("/api/")
        or request.accept_mimetypes.best == "application/json"
    )


def error_response(message, status_code):
    if wants_json():
        response = jsonify({"error": message})
        response.status_code = status_code
        return response

    template = "404.html" if status_code == 404 else "error.html"
    return render_template(template, message=message, status_code=status_code), status_code


def register_error_handlers(app):
    @app.errorhandler(SharerError)
    def handle_sharer_error(error):
        if isinstance(error, (StorageError, ExhaustedRetries)):
            current_app.logger.error("%s on %s %s: %s", type(error).__name__, request.method, request.path, error)
        return error_response(error.message, error.status_code)

    @app.errorhandler(404)
    def handle_not_found(error):
        return error_response("Not found", 404)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        if isinstance(error, HTTPException):
            return error
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response("Internal server error", 500)
