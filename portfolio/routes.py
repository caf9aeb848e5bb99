"""
URL routing: the Route enum, the route -> page switch and the blueprint.

Every Route value is a URL rule on the ``portfolio`` blueprint. Paths that
match nothing reach the app's 404 handler, which renders the same page as
``/404``.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import urlsplit

from flask import Blueprint, current_app, g, jsonify, redirect, render_template, request, url_for
from markupsafe import Markup

from . import pages
from .state import load_state, save_state, secret_package, step_counter


class Route(Enum):
    HOME = "/"
    PROJECTS = "/projects"
    CONTRIBUTIONS = "/contributions"
    ABOUT = "/about"
    BLOG = "/blog"  # legacy, still answers with the placeholder card
    NOT_FOUND = "/404"

    @classmethod
    def recognize(cls, path: str) -> "Route":
        """Route for an exact URL path; anything unknown is NOT_FOUND."""
        try:
            return cls(path)
        except ValueError:
            return cls.NOT_FOUND

    @property
    def endpoint(self) -> str:
        return self.name.lower()


PAGES = {
    Route.HOME: pages.home,
    Route.PROJECTS: pages.projects,
    Route.CONTRIBUTIONS: pages.contributions,
    Route.ABOUT: pages.about,
    Route.BLOG: pages.under_construction,
    Route.NOT_FOUND: pages.not_found,
}

_missing = [r.name for r in Route if r not in PAGES]
if _missing:
    raise RuntimeError(f"no page for route(s): {', '.join(_missing)}")


def switch(route: Route) -> Markup:
    """Markup of the one page ``route`` maps to."""
    return PAGES[route]()


# ---------------- views ----------------

bp = Blueprint("portfolio", __name__)


def render_app(route: Route):
    """Navbar, terrain and (unless the secret is out) the page for ``route``."""
    current_app.logger.debug("dispatching %s -> %s", request.path, route.name)
    # the switch sends the visitor back here after a toggle; every unknown
    # path shares the /404 page, so it also shares its return path
    g.back = route.value if route is Route.NOT_FOUND else request.path
    state = load_state()
    html = render_template(
        "app.html",
        secret=secret_package(state),
        content=switch(route),
        route=route,
    )
    return html, 404 if route is Route.NOT_FOUND else 200


def page():
    return render_app(Route.recognize(request.path))


for _route in Route:
    bp.add_url_rule(_route.value, _route.endpoint, page)


def not_found(_error):
    """404 handler: whatever path got here, ``recognize`` maps it to NOT_FOUND."""
    return render_app(Route.recognize(request.path))


def _local_target(target: str | None) -> str:
    """``target`` if it is a path on this site, else the home page."""
    home = url_for("portfolio.home")
    if not target or any(ch < " " or ch == "\x7f" for ch in target) or "\\" in target:
        return home
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return home
    if not parts.path.startswith("/") or parts.path.startswith("//"):
        return home
    return target


@bp.post("/secret")
def toggle_secret():
    """Flip the secret flag once and go back where the switch was clicked."""
    state = load_state()
    state.toggle_secret()
    save_state(state)
    current_app.logger.info("secret toggled: %s", state.secret)
    return redirect(_local_target(request.form.get("next")))


@bp.get("/secret")
def secret_status():
    """Secret flag for client polling."""
    return jsonify({"secret": load_state().secret}), 200


@bp.post("/counter/<any(increment, decrement):op>")
def step(op: str):
    value = step_counter(op)
    current_app.logger.debug("counter %s -> %d", op, value)
    return redirect(url_for("portfolio.home"))
