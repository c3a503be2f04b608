"""Phone catalogue rendered from HTML templates, optionally with static files."""

from __future__ import annotations

from dataclasses import dataclass

from werkzeug.exceptions import NotFound
from werkzeug.middleware.shared_data import SharedDataMiddleware
from werkzeug.wrappers import Request, Response

from webcourse.basic import _argument_parser, _renderer, _serve


@dataclass(frozen=True)
class Phone:
    """A phone shown in the catalogue."""

    model: str
    brand: str
    price: float


DEFAULT_PHONES: tuple[Phone, ...] = (
    Phone("iPhone 13", "Apple", 4999.90),
    Phone("Galaxy S22", "Samsung", 3999.00),
    Phone("Moto G100", "Motorola", 2299.50),
)

STATIC_SITE_PHONES: tuple[Phone, ...] = (
    Phone("iPhone 14", "Apple", 5999.99),
    Phone("Pixel 7", "Google", 4799.00),
    Phone("Galaxy A73", "Samsung", 2399.50),
)


def create_app(template_dir="templates", phones=None, static_dir=None):
    """Build the catalogue application.

    ``index.html`` is rendered with ``phones``; ``about.html`` with no context.
    When ``static_dir`` is given its files are served under ``/static/``.
    """
    render = _renderer(template_dir, report_errors=True)
    listed = list(DEFAULT_PHONES if phones is None else phones)

    @Request.application
    def app(request: Request) -> Response:
        if static_dir is not None and request.path.startswith("/static/"):
            return NotFound()
        if request.path == "/about":
            return render("about.html")
        return render("index.html", phones=listed)

    if static_dir is None:
        return app
    return SharedDataMiddleware(app, {"/static": str(static_dir)})


def main(argv=None) -> int:
    """Run the catalogue server."""
    parser = _argument_parser(
        "webcourse-catalog", description="Phone catalogue server.", templates=True
    )
    parser.add_argument("--static", default=None, help="directory served under /static/")
    args = parser.parse_args(argv)
    phones = STATIC_SITE_PHONES if args.static else DEFAULT_PHONES
    app = create_app(args.templates, phones, args.static)
    return _serve(
        app,
        args.host,
        args.port,
        f"Server running at http://localhost:{args.port}",
        "Error starting server:",
    )