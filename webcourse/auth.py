"""Login against the user database with a cookie-based session."""

from __future__ import annotations

import functools
import sqlite3
from datetime import datetime, timedelta, timezone

import bcrypt
from werkzeug.exceptions import NotFound
from werkzeug.utils import redirect
from werkzeug.wrappers import Request, Response

from webcourse.basic import _argument_parser, _form_values, _renderer, _serve
from webcourse.users import DEFAULT_DB_PATH, UserStore

SESSION_COOKIE = "session_email"
SESSION_LIFETIME = timedelta(hours=1)
LOGIN_ERROR = "Invalid email or password."
_LOGIN_FIELDS = ("email", "password")


def validate_login(db_path, email, password) -> bool:
    """Return True if ``email`` exists and ``password`` matches its stored hash."""
    try:
        store = UserStore(db_path)
    except sqlite3.Error:
        return False
    with store:
        try:
            hashed = store.password_hash(email)
        except sqlite3.Error:
            return False
    if hashed is None:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def require_session(view):
    """Wrap a request view so that requests without a session go to ``/login``."""

    @functools.wraps(view)
    def wrapper(request: Request) -> Response:
        if not request.cookies.get(SESSION_COOKIE):
            return redirect("/login", 303)
        return view(request)

    return wrapper


def create_app(template_dir="templates", db_path=DEFAULT_DB_PATH):
    """Build the login application.

    ``login.html`` gets no context, ``error.html`` receives ``message`` and
    ``dashboard.html`` receives ``email``.
    """
    render = _renderer(template_dir)

    def login(request: Request) -> Response:
        if request.method == "GET":
            return render("login.html")
        if request.method != "POST":
            return Response(b"")
        values = _form_values(request, *_LOGIN_FIELDS)
        email, password = values
        if not validate_login(db_path, email, password):
            return render("error.html", message=LOGIN_ERROR)
        response = redirect("/dashboard", 303)
        response.set_cookie(
            SESSION_COOKIE, email, expires=datetime.now(timezone.utc) + SESSION_LIFETIME
        )
        return response

    @require_session
    def dashboard(request: Request) -> Response:
        return render("dashboard.html", email=request.cookies.get(SESSION_COOKIE, ""))

    def logout(request: Request) -> Response:
        response = redirect("/login", 303)
        response.set_cookie(SESSION_COOKIE, "", max_age=0)
        return response

    routes = {"/login": login, "/dashboard": dashboard, "/logout": logout}

    @Request.application
    def app(request: Request) -> Response:
        view = routes.get(request.path)
        if view is None:
            return NotFound()
        return view(request)

    return app


def main(argv=None) -> int:
    """Run the login server."""
    args = _argument_parser(
        "webcourse-auth",
        description="Login and session server.",
        templates=True,
        db=DEFAULT_DB_PATH,
    ).parse_args(argv)
    return _serve(
        create_app(args.templates, args.db),
        args.host,
        args.port,
        f"Server running at http://localhost:{args.port}/login",
        "Error:",
    )