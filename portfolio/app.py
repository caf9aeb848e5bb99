"""
Portfolio site (Flask app factory).

Goals:
- Factory: create_app(config=None)
- Routes (see routes.py):
    GET  /, /projects, /contributions, /about, /blog, /404 -> page for that Route
    any other path                                          -> NotFound page, 404
    POST /secret               -> flip the secret flag, redirect back
    GET  /secret               -> {"secret": bool}
    POST /counter/<op>         -> step the home page counter
- Per-visitor state lives in the signed session cookie
- Widget helpers exposed to templates as Jinja globals
"""

from __future__ import annotations

import os

from flask import Flask

from .routes import bp, not_found
from .widgets import button, container, counter, navbar, secret_switch


# --------------- factory ---------------

def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.update(
        TESTING=False,
        SECRET_KEY=os.getenv("SECRET_KEY", "dev"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        # navbar content (tests or prod can override these):
        BRAND="NILSIKER",
        BLOG_URL="https://nilsiker.github.io/blog",
        GITHUB_URL="https://github.com/nilsiker",
        TWITTER_URL="https://twitter.com/nilsiker",
    )
    if config:
        app.config.update(config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    app.jinja_env.globals.update(
        button=button,
        container=container,
        counter=counter,
        navbar=navbar,
        secret_switch=secret_switch,
    )

    app.register_blueprint(bp)
    # unmatched paths are not an error, they are the NotFound page
    app.register_error_handler(404, not_found)

    return app
