[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webcourse"
version = "0.1.0"
description = "A series of small WSGI web applications: a menu, templates, static files, forms, SQLite storage and login sessions."
requires-python = ">=3.10"
keywords = ["wsgi", "werkzeug", "jinja2", "sqlite", "bcrypt", "forms", "authentication", "sessions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Education",
]
dependencies = [
    "werkzeug",
    "jinja2",
    "bcrypt",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
webcourse-menu = "webcourse.menu:main"
webcourse-basic = "webcourse.basic:main"
webcourse-catalog = "webcourse.catalog:main"
webcourse-phone-form = "webcourse.phone_form:main"
webcourse-phone-store = "webcourse.phone_store:main"
webcourse-users = "webcourse.users:main"
webcourse-auth = "webcourse.auth:main"

[tool.hatch.build.targets.wheel]
packages = ["webcourse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
