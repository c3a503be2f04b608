"""Small WSGI web applications: a menu, templates, static files, forms, SQLite storage and login sessions."""

__version__ = "0.1.0"