"""Course main menu: an index page linking to every lecture plus placeholder pages."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from jinja2 import Environment
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response


@dataclass(frozen=True)
class Lecture:
    """One entry of the main menu."""

    title: str
    path: str


LECTURES: tuple[Lecture, ...] = (
    Lecture("LECTURE 01 – Getting Started with Web Development in Go", "/lecture01"),
    Lecture("LECTURE 02 – HTML Templating with Go", "/lecture02"),
    Lecture("LECTURE 03 – Serving Static Files in Go", "/lecture03"),
    Lecture("LECTURE 04 – Handling Forms and Validations in Go", "/lecture04"),
    Lecture("LECTURE 05 – SQLite Integration in Go", "/lecture05"),
    Lecture("LECTURE 06 – CRUD Operations with SQLite and Go", "/lecture06"),
    Lecture("LECTURE 07 – User Authentication and Session Management in Go", "/lecture07"),
)

PLACEHOLDERS: dict[str, str] = {
    "/lecture01": "Lecture 01 - Conteúdo aqui...",
    "/lecture02": "Lecture 02 - Conteúdo aqui...",
    "/lecture03": "Lecture 03 - Conteúdo aqui...",
    "/lecture04": "Lecture 04 - Conteúdo aqui...",
    "/lecture05": "Lecture 05 - Conteúdo aqui...",
    "/lecture06": "Lecture 06 - Conteúdo aqui...",
    "/lecture07": "Lecture 07 - Conteúdo aqui....",
}

_MENU_TEMPLATE = Environment(autoescape=True).from_string(
    """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Go Web Course – Main Menu</title>
  <style>
    body { font-family: Arial, sans-serif; padding: 2rem; }
    h1 { color: #2c3e50; }
    ul { list-style: none; padding: 0; }
    li { margin-bottom: 10px; }
    a { text-decoration: none; color: #2980b9; }
    a:hover { text-decoration: underline; }
  </style>
</head>
<body>
  <h1>Go Web Course – Main Menu</h1>
  <ul>
  {% for lecture in lectures %}
    <li><a href="{{ lecture.path }}">{{ lecture.title }}</a></li>
  {% endfor %}
  </ul>
</body>
</html>
"""
)


def render_menu(lectures) -> str:
    """Render the menu page listing the given lectures."""
    return _MENU_TEMPLATE.render(lectures=list(lectures))


def create_app():
    """Build the WSGI application serving the menu and lecture placeholders."""

    @Request.application
    def app(request: Request) -> Response:
        text = PLACEHOLDERS.get(request.path)
        if text is not None:
            return Response(text, mimetype="text/plain")
        return Response(render_menu(LECTURES), mimetype="text/html")

    return app


def main(argv=None) -> int:
    """Run the menu server."""
    parser = argparse.ArgumentParser(prog="webcourse-menu", description="Course main menu server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    print(f"Server started at http://localhost:{args.port}")
    try:
        run_simple(args.host, args.port, create_app())
    except OSError as exc:
        print("Error starting server:", exc)
        return 1
    return 0