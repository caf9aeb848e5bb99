"""Small presentational widgets (Bootstrap markup, no state of their own)."""

from __future__ import annotations

from enum import Enum

from flask import current_app, render_template, url_for
from markupsafe import Markup

from .state import SecretPackage


class Style(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    LIGHT = "light"
    DARK = "dark"
    LINK = "link"

    @property
    def css_class(self) -> str:
        return f"btn-{self.value}"


def button(label, action: str, style: Style | None = None, block: bool = False) -> Markup:
    """Large button that posts to ``action``; ``block`` stretches it full width."""
    classes = f"btn {(style or Style.PRIMARY).css_class} btn-lg"
    return Markup(render_template(
        "widgets/button.html", label=label, action=action, classes=classes, block=block,
    ))


def container(content, fluid: bool = False, hidden: bool = False) -> Markup:
    return Markup(render_template(
        "widgets/container.html", content=content, fluid=fluid, hidden=hidden,
    ))


def secret_switch(secret: SecretPackage) -> Markup:
    """Checkbox mirroring ``secret.activated``; clicking posts to ``secret.toggler``."""
    return Markup(render_template("widgets/secret_switch.html", secret=secret))


def navbar(secret: SecretPackage | None = None) -> Markup:
    """Top navigation. The switch is only embedded when a package is given."""
    cfg = current_app.config
    return Markup(render_template(
        "widgets/navbar.html",
        secret=secret,
        hidden=bool(secret and secret.activated),
        brand=cfg["BRAND"],
        blog_url=cfg["BLOG_URL"],
        github_url=cfg["GITHUB_URL"],
        twitter_url=cfg["TWITTER_URL"],
    ))


def counter(title: str, value: int) -> Markup:
    return Markup(render_template(
        "widgets/counter.html",
        title=title,
        display=f"{value:02}",
        decrement=url_for("portfolio.step", op="decrement"),
        increment=url_for("portfolio.step", op="increment"),
        Style=Style,
    ))
