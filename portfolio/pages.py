"""Page bodies. Each function returns the markup that goes inside the App container."""

from __future__ import annotations

from flask import render_template
from markupsafe import Markup

from .cards import NotFound, UnderConstruction, card_grid, render
from .content import about_card, load_contributions, load_projects
from .state import read_counter
from .widgets import counter


def home() -> Markup:
    return counter("Counter", read_counter())


def projects() -> Markup:
    return Markup(render_template(
        "pages/listing.html",
        title="Projects",
        leads=[
            "Welcome to my project portfolio!",
            "Below you'll find stuff that I have worked on, or am currently working on!",
        ],
        grid=card_grid(load_projects()),
    ))


def contributions() -> Markup:
    return Markup(render_template(
        "pages/listing.html",
        title="Contributions",
        leads=["Below you'll find my open-source contributions."],
        grid=card_grid(load_contributions()),
    ))


def about() -> Markup:
    return render(about_card())


def under_construction() -> Markup:
    return render(UnderConstruction())


def not_found() -> Markup:
    return render(NotFound())
