"""
JSON API endpoints of the stub console.

Endpoints:
    GET  /kylin/api/health               - Health check
    POST /kylin/api/user/authentication  - Log in with HTTP basic credentials
    GET  /kylin/api/user/authentication  - Current session user
"""

import logging

from flask import Blueprint, current_app, jsonify, request, session

from console_app.models import AccountStore

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _accounts() -> AccountStore:
    return current_app.extensions["console_accounts"]


def _unauthorized(message: str):
    return jsonify({"code": "999", "msg": message}), 401


@api_bp.route("/health", methods=["GET"])
def health_check():
    """
    Health check endpoint.

    Returns:
        JSON response with service status.
    """
    return jsonify({"status": "healthy", "service": "console-stub"}), 200


@api_bp.route("/user/authentication", methods=["POST"])
def authenticate():
    """
    Log in with HTTP basic credentials and start a session.

    Returns:
        200 with the user payload, or 401 when the credentials are wrong.
    """
    auth = request.authorization
    if auth is None or not auth.username:
        return _unauthorized("Missing credentials")

    account = _accounts().authenticate(auth.username, auth.password or "")
    if account is None:
        logger.info("POST /user/authentication - rejected %s", auth.username)
        return _unauthorized("Invalid username or password.")

    session["username"] = account.username
    logger.info("POST /user/authentication - %s logged in", account.username)
    return jsonify({"code": "000", "data": account.to_dict(), "msg": ""}), 200


@api_bp.route("/user/authentication", methods=["GET"])
def current_user():
    """
    Return the user bound to the current session.

    Returns:
        200 with the user payload, or 401 for an anonymous session.
    """
    username = session.get("username")
    account = _accounts().get(username) if username else None
    if account is None:
        return _unauthorized("Not logged in")
    return jsonify({"code": "000", "data": account.to_dict(), "msg": ""}), 200
