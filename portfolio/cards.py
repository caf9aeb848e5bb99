"""
Card values and their markup.

A card is one of four frozen dataclasses (``Custom``, ``Flip``,
``UnderConstruction``, ``NotFound``). ``render`` turns any of them into
``Markup`` through a Jinja template per variant; every card also implements
``__html__`` so it can be dropped straight into a template as ``{{ card }}``.

Rendering needs a Flask app context (templates are looked up through
``render_template``). Building cards does not.
"""

from __future__ import annotations

from dataclasses import dataclass

from flask import render_template
from markupsafe import Markup


# ---------------- image widgets ----------------

@dataclass(frozen=True)
class Icon:
    """A feather icon, swapped for an inline SVG by feather.replace()."""

    name: str
    color: str | None = None
    size: str | None = None

    def __html__(self) -> str:
        attrs = Markup("")
        if self.color:
            attrs += Markup(' color="{}"').format(self.color)
        if self.size:
            attrs += Markup(' width="{0}" height="{0}"').format(self.size)
        return Markup('<i data-feather="{}"{}></i>').format(self.name, attrs)


@dataclass(frozen=True)
class CardImage:
    """A fixed-height picture on a coloured band; ``fit`` crops to cover."""

    src: str
    bg: str
    fit: bool = False

    def __html__(self) -> str:
        return Markup(render_template("cards/image.html", image=self))


@dataclass(frozen=True)
class CardIcon:
    """An icon filling the image slot of a card."""

    icon: Icon
    bg: str

    def __html__(self) -> str:
        return Markup(render_template("cards/icon.html", image=self))


# ---------------- card variants ----------------

class _Renderable:
    def __html__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class UnderConstruction(_Renderable):
    pass


@dataclass(frozen=True)
class NotFound(_Renderable):
    pass


@dataclass(frozen=True)
class Custom(_Renderable):
    header: str | None
    image: str | None
    content: Markup


@dataclass(frozen=True)
class Flip(_Renderable):
    header: str
    image: CardImage | CardIcon | Markup
    front: Markup
    back: Markup


Card = Custom | Flip | UnderConstruction | NotFound
CARD_TYPES = (Custom, Flip, UnderConstruction, NotFound)

_TEMPLATES = {
    UnderConstruction: "cards/under_construction.html",
    NotFound: "cards/not_found.html",
    Custom: "cards/custom.html",
    Flip: "cards/flip.html",
}

_missing = [t.__name__ for t in CARD_TYPES if t not in _TEMPLATES]
if _missing:
    raise RuntimeError(f"no template for card variant(s): {', '.join(_missing)}")


def render(card: Card) -> Markup:
    """Render a card to markup.

    ``Custom`` omits the heading and image nodes when ``header`` / ``image``
    are None. ``Flip`` always emits both faces; which one shows is up to CSS.

    Raises:
        TypeError: ``card`` is not one of the card variants.
    """
    template = _TEMPLATES.get(type(card))
    if template is None:
        raise TypeError(f"not a card: {card!r}")
    return Markup(render_template(template, card=card))


def card_grid(cards: list) -> Markup:
    """Lay cards out left-to-right in a responsive grid, keeping their order."""
    return Markup(render_template("cards/grid.html", cards=cards))
