# webcourse

Seven small WSGI web applications, each going a step further than the one
before. Each is built with Werkzeug and Jinja2.

| Command                 | Module                   | What it serves                                                          |
|-------------------------|--------------------------|-------------------------------------------------------------------------|
| `webcourse-menu`        | `webcourse.menu`         | A main menu page linking to seven lesson pages, `/lecture01`–`/lecture07` |
| `webcourse-basic`       | `webcourse.basic`        | An `index.html` file at every path and a plain-text `/about` page       |
| `webcourse-catalog`     | `webcourse.catalog`      | A phone list and an about page from templates, optionally `/static/`    |
| `webcourse-phone-form`  | `webcourse.phone_form`   | A `/register` form that checks every field is filled in                 |
| `webcourse-phone-store` | `webcourse.phone_store`  | The `/register` form saving phones to SQLite, listed at `/phones`       |
| `webcourse-users`       | `webcourse.users`        | `/user/register`, storing users with bcrypt-hashed passwords            |
| `webcourse-auth`        | `webcourse.auth`         | `/login`, a cookie-protected `/dashboard` and `/logout`                 |

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
webcourse-menu
webcourse-basic
webcourse-catalog
webcourse-phone-form
webcourse-phone-store
webcourse-users
webcourse-auth
```

Every command accepts `--host` (default `0.0.0.0`) and `--port` (default
`8080`). The others add:

- `webcourse-basic`: `--index`, the file served as the home page (default
  `index.html`). It is re-read on every request. If it cannot be read, the
  response is a 500 "Unable to load homepage".
- `webcourse-catalog`, `webcourse-phone-form`, `webcourse-phone-store`,
  `webcourse-users`, `webcourse-auth`: `--templates`, the directory of `*.html`
  templates (default `templates`). At least one `*.html` file must be there,
  or the application will not start.
- `webcourse-catalog`: `--static DIR` serves the files of `DIR` under
  `/static/`. With it the catalog lists a second set of sample phones.
- `webcourse-phone-store`: `--db` (default `phones.db`).
- `webcourse-users`, `webcourse-auth`: `--db` (default `/database/users.db`).
  Give both the same database, and a user registered with one can log in with
  the other.

If a server cannot bind its port, the command prints the error and exits with
status 1.

## Templates

The template-driven applications render these files from the template
directory, with these variables:

| Application   | Template         | Variables                                                             |
|---------------|------------------|-----------------------------------------------------------------------|
| `catalog`     | `index.html`     | `phones`: `Phone` objects with `model`, `brand`, `price` (float)      |
| `catalog`     | `about.html`     | none                                                                  |
| `phone_form`  | `form.html`      | `phone`: `None`, or a `PhoneSubmission` with `model`, `brand`, `price`, `error` |
| `phone_form`  | `success.html`   | `phone`: the accepted `PhoneSubmission`                               |
| `phone_store` | `form.html`      | `error`: `None` or `"All fields are required"`                        |
| `phone_store` | `list.html`      | `phones`: `Phone` objects with `id`, `model`, `brand`, `price`        |
| `users`       | `register.html`  | `user`: `None`, or a `User` with `name`, `email`, `error`             |
| `users`       | `success.html`   | `name`                                                                |
| `auth`        | `login.html`     | none                                                                  |
| `auth`        | `error.html`     | `message`: `"Invalid email or password."`                             |
| `auth`        | `dashboard.html` | `email`                                                               |

Templates are rendered with HTML autoescaping on.

## Behaviour in brief

- **phone_form**: `GET /register` shows the empty form. `POST` trims the
  fields. If one is empty, the form is shown again with
  `"All fields are required."`; otherwise `success.html` is rendered. Other
  methods get 405. Other paths get 404.
- **phone_store**: a valid `POST /register` inserts the phone and redirects to
  `/phones` with a 303 status. If the insert fails, the response is a 500
  "Error saving data".
- **users**: a valid `POST /user/register` hashes the password with bcrypt
  (cost 10) and stores the user. If the email is already taken, the form is
  shown again with `"Error saving user: email may already be in use."`.
- **auth**: a successful `POST /login` sets a `session_email` cookie that holds
  the email and lasts one hour. It then redirects to `/dashboard`. Visiting
  `/dashboard` without that cookie redirects to `/login`. `/logout` clears the
  cookie and redirects to `/login`.

## Using the applications from Python

Each module has a `create_app` function that returns a WSGI application.
Mount it in any WSGI server, or drive it with Werkzeug's test client:

```python
from werkzeug.test import Client

from webcourse.phone_form import create_app, validate_submission

client = Client(create_app("templates"))
response = client.post("/register", data={"model": "Pixel 7", "brand": "Google", "price": "4799.00"})

submission = validate_submission(" Pixel 7 ", "Google", "")
print(submission.error)  # All fields are required.
```

`webcourse.menu.render_menu(lectures)` renders the menu page for any iterable
of `Lecture(title, path)` entries.

The storage classes can be used on their own:

```python
from webcourse.phone_store import PhoneStore

with PhoneStore("phones.db") as store:
    store.create_table()
    store.insert("Galaxy S22", "Samsung", "3999.00")
    for phone in store.all():
        print(phone.id, phone.model, phone.brand, phone.price)
```

`webcourse.users` provides `UserStore` (with `create_table`, `insert`,
`password_hash` and `close`) and `hash_password`. `webcourse.auth` provides
`validate_login(db_path, email, password)` and the `require_session`
decorator. The decorator redirects a request without a `session_email` cookie
to `/login`.

## What this package does not do

- It ships no HTML templates and no `index.html`. Supply your own, using the
  names and variables listed above.
- The menu's lesson pages are short plain-text placeholders. They do not run
  the other applications.
- The session cookie is neither signed nor encrypted. It holds the email as
  plain text, and the dashboard trusts any non-empty value.
- No application offers editing or deletion of stored phones or users.