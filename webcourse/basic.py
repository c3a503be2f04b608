"""A minimal web server, plus the serving helpers the other course servers share."""

from __future__ import annotations

import argparse
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response


def _plain_error(message: str, status: int) -> Response:
    """A plain-text error response with a trailing newline."""
    return Response(
        message + "\n",
        status=status,
        mimetype="text/plain",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _renderer(template_dir, *, report_errors: bool = False):
    """Load every ``*.html`` template in ``template_dir`` and return a render function.

    With ``report_errors`` a template failure becomes a 500 plain-text response
    instead of propagating.
    """
    path = Path(template_dir)
    if not any(path.glob("*.html")):
        raise FileNotFoundError(f"no templates match {path / '*.html'}")
    env = Environment(loader=FileSystemLoader(str(path)), autoescape=True)

    def render(name: str, **context) -> Response:
        try:
            html = env.get_template(name).render(**context)
        except TemplateError as exc:
            if not report_errors:
                raise
            return _plain_error(str(exc), 500)
        return Response(html, mimetype="text/html")

    return render


def _form_value(request: Request, name: str) -> str:
    value = request.form.get(name)
    return request.args.get(name, "") if value is None else value


def _form_values(request: Request, *names: str) -> list[str]:
    """The named form values, falling back to the query string, stripped."""
    return [_form_value(request, name).strip() for name in names]


def _argument_parser(prog: str, *, description=None, templates=False, db=None):
    """A command-line parser with the options shared by the course servers."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    if templates:
        parser.add_argument("--templates", default="templates")
    if db is not None:
        parser.add_argument("--db", default=db)
    return parser


def _serve(app, host: str, port: int, banner: str, error_label: str) -> int:
    """Print ``banner`` and run ``app``; return 1 if the server cannot start."""
    print(banner)
    try:
        run_simple(host, port, app)
    except OSError as exc:
        print(error_label, exc)
        return 1
    return 0


def create_app(index_path="index.html"):
    """Build the application; the home page file is re-read on every request."""
    index = Path(index_path)

    @Request.application
    def app(request: Request) -> Response:
        if request.path == "/about":
            return Response("This is a basic web server built in Go.\n", mimetype="text/plain")
        try:
            return Response(index.read_bytes(), mimetype="text/html")
        except OSError:
            return _plain_error("Unable to load homepage", 500)

    return app


def main(argv=None) -> int:
    """Run the basic server."""
    parser = _argument_parser("webcourse-basic")
    parser.add_argument("--index", default="index.html")
    args = parser.parse_args(argv)
    return _serve(
        create_app(args.index),
        args.host,
        args.port,
        f"Server is running at http://localhost:{args.port}",
        "Error starting server: ",
    )