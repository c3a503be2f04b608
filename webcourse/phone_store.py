"""Phone registration backed by SQLite, with a listing page."""

from __future__ import annotations

import sqlite3
from contextlib import suppress
from dataclasses import dataclass

from werkzeug.exceptions import NotFound
from werkzeug.utils import redirect
from werkzeug.wrappers import Request, Response

from webcourse.basic import _argument_parser, _form_values, _plain_error, _renderer, _serve

REQUIRED_MESSAGE = "All fields are required"


@dataclass(frozen=True)
class Phone:
    """A stored phone."""

    id: int
    model: str
    brand: str
    price: str


class PhoneStore:
    """Phones kept in an SQLite database."""

    def __init__(self, path):
        self._conn = sqlite3.connect(str(path))

    def create_table(self) -> None:
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS phones ("
                "id INTEGER PRIMARY KEY AUTOINCREMENT, model TEXT, brand TEXT, price TEXT)"
            )

    def insert(self, model, brand, price) -> None:
        with self._conn:
            self._conn.execute(
                "INSERT INTO phones (model, brand, price) VALUES (?, ?, ?)", (model, brand, price)
            )

    def all(self) -> list[Phone]:
        return [Phone(*row) for row in self._conn.execute("SELECT id, model, brand, price FROM phones")]

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> PhoneStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def create_app(template_dir="templates", db_path="phones.db"):
    """Build the application; ``form.html`` gets ``error``, ``list.html`` gets ``phones``."""
    render = _renderer(template_dir)

    def register(request: Request, store: PhoneStore | None) -> Response:
        if request.method == "GET":
            return render("form.html", error=None)
        if request.method != "POST":
            return Response(b"")
        model, brand, price = _form_values(request, "model", "brand", "price")
        if not (model and brand and price):
            return render("form.html", error=REQUIRED_MESSAGE)
        try:
            if store is None:
                raise sqlite3.OperationalError("database unavailable")
            store.insert(model, brand, price)
        except sqlite3.Error:
            return _plain_error("Error saving data", 500)
        return redirect("/phones", 303)

    def listing(store: PhoneStore | None) -> Response:
        try:
            if store is None:
                raise sqlite3.OperationalError("database unavailable")
            phones = store.all()
        except sqlite3.Error:
            return _plain_error("Error loading data", 500)
        return render("list.html", phones=phones)

    @Request.application
    def app(request: Request) -> Response:
        if request.path not in ("/register", "/phones"):
            return NotFound()
        try:
            store: PhoneStore | None = PhoneStore(db_path)
        except sqlite3.Error:
            store = None
        try:
            if store is not None:
                with suppress(sqlite3.Error):
                    store.create_table()
            if request.path == "/register":
                return register(request, store)
            return listing(store)
        finally:
            if store is not None:
                store.close()

    return app


def main(argv=None) -> int:
    """Run the phone store server."""
    args = _argument_parser("webcourse-phones", templates=True, db="phones.db").parse_args(argv)
    return _serve(
        create_app(args.templates, args.db),
        args.host,
        args.port,
        f"Server running at http://localhost:{args.port}/register",
        "Error:",
    )