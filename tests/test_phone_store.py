import sqlite3

import pytest
from werkzeug.test import Client

from webcourse.phone_store import REQUIRED_MESSAGE, Phone, PhoneStore, create_app, main

FORM = "FORM{% if error %}|{{ error }}{% endif %}"
LIST = "{% for p in phones %}{{ p.id }};{{ p.model }};{{ p.brand }};{{ p.price }}\n{% endfor %}"


@pytest.fixture
def templates(tmp_path):
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "form.html").write_text(FORM, encoding="utf-8")
    (directory / "list.html").write_text(LIST, encoding="utf-8")
    return directory


@pytest.fixture
def client(templates, tmp_path):
    return Client(create_app(templates, tmp_path / "phones.db"))


def test_store_round_trip(tmp_path):
    with PhoneStore(tmp_path / "p.db") as store:
        store.create_table()
        store.insert("Pixel", "Google", "10")
        store.insert("Moto", "Motorola", "20")
        phones = store.all()
    assert [(p.model, p.brand, p.price) for p in phones] == [("Pixel", "Google", "10"), ("Moto", "Motorola", "20")]
    assert phones[0].id < phones[1].id


def test_store_persists_across_connections(tmp_path):
    path = tmp_path / "p.db"
    with PhoneStore(path) as store:
        store.create_table()
        store.insert("A", "B", "C")
    with PhoneStore(path) as store:
        store.create_table()
        assert [p.model for p in store.all()] == ["A"]


def test_store_empty(tmp_path):
    with PhoneStore(tmp_path / "p.db") as store:
        store.create_table()
        assert store.all() == []


def test_store_closed_raises(tmp_path):
    store = PhoneStore(tmp_path / "p.db")
    store.close()
    with pytest.raises(sqlite3.ProgrammingError):
        store.all()


def test_get_register_shows_form(client):
    assert client.get("/register").get_data(as_text=True) == "FORM"


def test_post_inserts_and_redirects(client, tmp_path):
    response = client.post("/register", data={"model": " Pixel ", "brand": "Google", "price": "10"})
    assert response.status_code == 303
    assert response.headers["Location"] == "/phones"
    with PhoneStore(tmp_path / "phones.db") as store:
        stored = store.all()
    assert stored == [Phone(stored[0].id, "Pixel", "Google", "10")]
    body = client.get("/phones").get_data(as_text=True)
    assert body == f"{stored[0].id};Pixel;Google;10\n"


def test_post_missing_field_shows_error(client):
    response = client.post("/register", data={"model": "Pixel", "brand": "", "price": "10"})
    assert response.get_data(as_text=True) == f"FORM|{REQUIRED_MESSAGE}"
    assert client.get("/phones").get_data(as_text=True) == ""


def test_other_method_gives_empty_body(client):
    response = client.put("/register")
    assert response.get_data() == b""


def test_unavailable_database(templates, tmp_path):
    client = Client(create_app(templates, tmp_path))
    saved = client.post("/register", data={"model": "a", "brand": "b", "price": "c"})
    assert saved.status_code == 500
    assert saved.get_data(as_text=True) == "Error saving data\n"
    listed = client.get("/phones")
    assert listed.get_data(as_text=True) == "Error loading data\n"


def test_unknown_path_not_found(client):
    assert client.get("/nothing").status_code == 404


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit):
        main(["--port", "x"])