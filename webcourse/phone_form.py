"""Phone registration form with required-field validation."""

from __future__ import annotations

from dataclasses import dataclass

from werkzeug.exceptions import NotFound
from werkzeug.wrappers import Request, Response

from webcourse.basic import _argument_parser, _form_values, _plain_error, _renderer, _serve

REQUIRED_MESSAGE = "All fields are required."


@dataclass(frozen=True)
class PhoneSubmission:
    """Values submitted through the form, with an error message if invalid."""

    model: str
    brand: str
    price: str
    error: str = ""


def validate_submission(model, brand, price) -> PhoneSubmission:
    """Trim the fields and flag the submission if any of them is empty."""
    model, brand, price = (str(value or "").strip() for value in (model, brand, price))
    error = "" if model and brand and price else REQUIRED_MESSAGE
    return PhoneSubmission(model, brand, price, error)


def create_app(template_dir="templates"):
    """Build the form application; templates receive ``phone`` (or None)."""
    render = _renderer(template_dir)

    @Request.application
    def app(request: Request) -> Response:
        if request.path != "/register":
            return NotFound()
        if request.method == "GET":
            return render("form.html", phone=None)
        if request.method != "POST":
            return _plain_error("Method not allowed", 405)
        submission = validate_submission(*_form_values(request, "model", "brand", "price"))
        return render("form.html" if submission.error else "success.html", phone=submission)

    return app


def main(argv=None) -> int:
    """Run the form server."""
    args = _argument_parser("webcourse-form", templates=True).parse_args(argv)
    return _serve(
        create_app(args.templates),
        args.host,
        args.port,
        f"Server running at http://localhost:{args.port}/register",
        "Error:",
    )