"""User registration with bcrypt-hashed passwords stored in SQLite."""

from __future__ import annotations

import sqlite3
from contextlib import suppress
from dataclasses import dataclass

import bcrypt
from werkzeug.exceptions import NotFound
from werkzeug.wrappers import Request, Response

from webcourse.basic import _argument_parser, _form_values, _plain_error, _renderer, _serve

DEFAULT_DB_PATH = "/database/users.db"
BCRYPT_COST = 10
REQUIRED_MESSAGE = "All fields are required."
DUPLICATE_MESSAGE = "Error saving user: email may already be in use."
_REGISTER_FIELDS = ("name", "email", "password")

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT UNIQUE NOT NULL,
    password TEXT NOT NULL
)
"""


@dataclass(frozen=True)
class User:
    """Registration form values, with an error message if the attempt failed."""

    name: str
    email: str
    password: str = ""
    error: str = ""


class UserStore:
    """Users kept in an SQLite database."""

    def __init__(self, path):
        self._conn = sqlite3.connect(str(path))

    def create_table(self) -> None:
        with self._conn:
            self._conn.execute(_CREATE_TABLE)

    def insert(self, name, email, hashed_password) -> None:
        """Store a user; raises sqlite3.IntegrityError if the email is taken."""
        with self._conn:
            self._conn.execute(
                "INSERT INTO users(name, email, password) VALUES (?, ?, ?)",
                (name, email, hashed_password),
            )

    def password_hash(self, email) -> str | None:
        """Return the stored hash for ``email``, or None if there is no such user."""
        row = self._conn.execute(
            "SELECT password FROM users WHERE email = ?", (email,)
        ).fetchone()
        return None if row is None else row[0]

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> UserStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def hash_password(password) -> str:
    """Hash a password with bcrypt at the default cost."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_COST)).decode(
        "ascii"
    )


def create_app(template_dir="templates", db_path=DEFAULT_DB_PATH):
    """Build the registration application served at ``/user/register``.

    ``register.html`` receives ``user`` (a User, or None for an empty form);
    ``success.html`` receives ``name``.
    """
    render = _renderer(template_dir)

    def register(request: Request, store: UserStore) -> Response:
        if request.method == "GET":
            return render("register.html", user=None)
        values = _form_values(request, *_REGISTER_FIELDS)
        name, email, password = values
        if not (name and email and password):
            return render("register.html", user=User(name, email, error=REQUIRED_MESSAGE))
        try:
            hashed = hash_password(password)
        except ValueError:
            return _plain_error("Error encrypting password", 500)
        try:
            store.insert(name, email, hashed)
        except sqlite3.Error:
            return render("register.html", user=User(name, email, error=DUPLICATE_MESSAGE))
        return render("success.html", name=name)

    @Request.application
    def app(request: Request) -> Response:
        if request.path != "/user/register":
            return NotFound()
        try:
            store = UserStore(db_path)
        except sqlite3.Error:
            return _plain_error("Database error", 500)
        with store:
            with suppress(sqlite3.Error):
                store.create_table()
            return register(request, store)

    return app


def main(argv=None) -> int:
    """Run the user registration server."""
    args = _argument_parser(
        "webcourse-users",
        description="User registration server.",
        templates=True,
        db=DEFAULT_DB_PATH,
    ).parse_args(argv)
    return _serve(
        create_app(args.templates, args.db),
        args.host,
        args.port,
        f"Server running at http://localhost:{args.port}/user/register",
        "Error:",
    )