"""
HTML view routes for the stub console.

Routes:
    GET  /                - Main page with the top bar (login required)
    GET  /login           - Login form
    POST /login           - Submit credentials
    POST /logout          - End the session
    POST /license/dismiss - Close the license dialog for this session
"""

import logging
from functools import wraps

from flask import (
    Blueprint,
    current_app,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from console_app.models import AccountStore, LicenseInfo, UserAccount

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

LOGIN_ERROR_MESSAGE = "Invalid username or password."


def _accounts() -> AccountStore:
    return current_app.extensions["console_accounts"]


def _license() -> LicenseInfo:
    return current_app.extensions["console_license"]


def _session_user() -> UserAccount | None:
    """Return the account bound to the session cookie, if any."""
    username = session.get("username")
    if not username:
        return None
    return _accounts().get(username)


def login_required(view):
    """Redirect anonymous sessions to the login form."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if _session_user() is None:
            return redirect(url_for("views.login"))
        return view(*args, **kwargs)

    return wrapper


@views_bp.route("/")
@login_required
def index():
    """
    Render the main page.

    The license dialog is shown on top of the page until the user
    dismisses it for the current session.

    Returns:
        Rendered index.html template.
    """
    user = _session_user()
    license_info = _license()
    show_license = license_info.show_notice and not session.get("license_dismissed")
    logger.info("GET / - Rendering main page for %s", user.username)

    return render_template(
        "index.html",
        user=user,
        project=current_app.config["CONSOLE_PROJECT_NAME"],
        license=license_info,
        show_license=show_license,
    )


@views_bp.route("/login", methods=["GET", "POST"])
def login():
    """
    Show the login form or process a submitted one.

    Returns:
        Redirect to the main page on success, otherwise the login form
        (with an error message and status 401 after a failed attempt).
    """
    if request.method == "GET":
        if _session_user() is not None:
            return redirect(url_for("views.index"))
        return render_template("login.html")

    username = request.form.get("username", "")
    password = request.form.get("password", "")
    account = _accounts().authenticate(username, password)
    if account is None:
        logger.info("POST /login - rejected credentials for %s", username)
        return render_template("login.html", error=LOGIN_ERROR_MESSAGE, username=username), 401

    session.clear()
    session["username"] = account.username
    logger.info("POST /login - %s logged in", account.username)
    return redirect(url_for("views.index"))


@views_bp.route("/logout", methods=["POST"])
def logout():
    """End the session and return to the login form."""
    username = session.get("username")
    session.clear()
    logger.info("POST /logout - %s logged out", username)
    return redirect(url_for("views.login"))


@views_bp.route("/license/dismiss", methods=["POST"])
@login_required
def dismiss_license():
    """Hide the license dialog for the rest of the session."""
    session["license_dismissed"] = True
    return redirect(url_for("views.index"))
