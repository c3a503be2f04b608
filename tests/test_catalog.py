import pytest
from werkzeug.test import Client

from webcourse.catalog import DEFAULT_PHONES, STATIC_SITE_PHONES, Phone, create_app, main

INDEX = "{% for p in phones %}{{ p.model }};{{ p.brand }};{{ p.price }}\n{% endfor %}"


@pytest.fixture
def templates(tmp_path):
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "index.html").write_text(INDEX, encoding="utf-8")
    (directory / "about.html").write_text("About {{ 1 + 1 }}", encoding="utf-8")
    return directory


def _rows(body):
    return [line.split(";") for line in body.splitlines()]


def test_home_lists_default_phones(templates):
    body = Client(create_app(templates)).get("/").get_data(as_text=True)
    rows = _rows(body)
    assert [row[0] for row in rows] == [p.model for p in DEFAULT_PHONES]
    assert [row[1] for row in rows] == [p.brand for p in DEFAULT_PHONES]
    assert [float(row[2]) for row in rows] == [p.price for p in DEFAULT_PHONES]


def test_home_lists_given_phones(templates):
    phones = [Phone("<X>", "Brand", 1.5)]
    body = Client(create_app(templates, phones)).get("/").get_data(as_text=True)
    assert "&lt;X&gt;" in body
    assert "<X>" not in body


def test_about_page(templates):
    response = Client(create_app(templates)).get("/about")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "About 2"


def test_missing_template_is_server_error(templates):
    (templates / "about.html").unlink()
    response = Client(create_app(templates)).get("/about")
    assert response.status_code == 500
    assert "about.html" in response.get_data(as_text=True)


def test_no_templates_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_app(tmp_path)


def test_static_files_served(templates, tmp_path):
    static = tmp_path / "static"
    static.mkdir()
    (static / "style.css").write_text("body{}", encoding="utf-8")
    client = Client(create_app(templates, STATIC_SITE_PHONES, static))
    assert client.get("/static/style.css").get_data(as_text=True) == "body{}"
    assert client.get("/static/missing.css").status_code == 404
    rows = _rows(client.get("/").get_data(as_text=True))
    assert [row[0] for row in rows] == [p.model for p in STATIC_SITE_PHONES]


def test_static_prefix_without_static_dir_serves_home(templates):
    response = Client(create_app(templates)).get("/static/style.css")
    assert len(_rows(response.get_data(as_text=True))) == len(DEFAULT_PHONES)


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        main(["--port", "x"])