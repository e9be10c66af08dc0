# backend/utils/errors.py

from flask import jsonify
from werkzeug.exceptions import HTTPException

from utils.logger import get_logger

log = get_logger("errors")


class PortalError(Exception):
    """Base for errors that map onto an HTTP status and a JSON envelope."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ReadError(PortalError):
    status_code = 500
    default_message = "Failed to read data"


class WriteError(PortalError):
    status_code = 500
    default_message = "Failed to save data"


class NotFoundError(PortalError):
    status_code = 404
    default_message = "Not found"


class ValidationError(PortalError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(PortalError):
    status_code = 401
    default_message = "Invalid credentials"


def error_response(message, status_code, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status_code


# =====================================================
# REGISTER HANDLERS (UNIFORM JSON ENVELOPE)
# =====================================================
def register_error_handlers(app):

    @app.errorhandler(PortalError)
    def handle_portal_error(exc):
        if exc.status_code >= 500:
            log.error("%s: %s", type(exc).__name__, exc.message)
        return error_response(exc.message, exc.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        return error_response(exc.description, exc.code)

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        log.exception("Unhandled error")
        return error_response("Server error", 500, error=str(exc))
