"""Hand-authored card data. Lists are in presentation order; keep it."""

from __future__ import annotations

from markupsafe import Markup

from .cards import Card, CardIcon, CardImage, Custom, Flip, Icon

GITHUB_BUTTON = Markup('<a type="button" class="btn btn-light mx-2 text-dark" href="{}">{}</a>')


def _github(url: str) -> Markup:
    return GITHUB_BUTTON.format(url, Icon("github"))


def load_projects() -> list[Card]:
    return [
        Flip(
            header="Contour",
            image=CardImage(src="/static/contour.png", bg="black"),
            front=Markup(
                '<div>A pixel-art horror noir detective game, powered by Rust and Bevy.</div>'
            ),
            back=Markup(
                "<p>A pixel-art horror noir detective game, powered by Rust and Bevy.</p>"
                '<p class="fst-italic">A private investigator takes on a seemingly routine '
                "missing person case, only to find himself in a sinister mystery beyond "
                "comprehension.</p>"
                "<p>In active development.</p>"
                "<hr>"
                '<a class="btn btn-danger" href="https://nilsiker.itch.io/contour" type="button">'
                "Play on itch.io</a>"
            ) + _github("https://github.com/nilsiker/contour"),
        ),
        Flip(
            header="bevy_ymir",
            image=CardImage(src="/static/ymir-early-world.png", bg="transparent", fit=True),
            front=Markup(
                "<div>A procedural world generator plugin for Bevy, a Rust game engine.</div>"
            ),
            back=Markup(
                "<div>"
                "<p>A plugin for generating and streaming procedural worlds in Bevy.</p>"
                "<p>The ambition is to provide a customizable world generator, with support "
                "for different biomes and various methods for procedural object placement.</p>"
                "<p>Keep in mind that Ymir is in very early development. Expect hard-to-use "
                "APIs that break constantly!</p>"
                "<hr>{}</div>"
            ).format(_github("https://github.com/nilsiker/bevy_ymir")),
        ),
        Flip(
            header="nilsiker blog",
            image=CardIcon(icon=Icon("book", color="white", size="100%"), bg="#55ff8c77"),
            front=Markup(
                "<div>My blog and news site powered by Zine. This is were I keep my "
                "personal rants and ramblings.</div>"
            ),
            back=Markup(
                "<div>"
                "<p>Alongside this portfolio page, I keep a Zine site where I post about my "
                "code endeavours and occassional slice-of-life posts.</p>"
                "<p>The blog also serves as a devlog for my various projects.</p>"
                "<p>If you're looking for a more relaxed everyday-Andreas, chances are "
                "you'll find him more easily over the blog!</p>"
                "<hr>"
                '<a type="button" class="btn btn-light mx-2 text-dark" '
                'href="https://nilsiker.github.io/blog">{}</a>{}'
                "</div>"
            ).format(Icon("link"), _github("https://github.com/nilsiker/blog")),
        ),
        Flip(
            header="nilsiker.github.io",
            image=CardImage(src="/static/unsplash.jpg", bg="transparent", fit=True),
            front=Markup(
                "<div>The very page you're looking at now, delivered to you with Python "
                "and Flask.</div>"
            ),
            back=Markup(
                "<div>"
                "<p>With the risk that this becomes a bit meta, I am also actively working "
                "on this portfolio website!</p>"
                "<p>At the moment, it is a small Flask site with every page built from "
                "cards.</p>"
                '<p class="fst-italic">If you want to hunt for a secret, remember that some '
                "underlines are just for show.</p>"
                "<hr>{}</div>"
            ).format(_github("https://github.com/nilsiker/nilsiker.github.io")),
        ),
    ]


def load_contributions() -> list[Card]:
    blurb = "Unofficial community Foundry VTT system for The Burning Wheel RPG."
    return [
        Flip(
            header="foundry-burningwheel",
            image=CardIcon(
                icon=Icon("aperture", color="darkorange", size="100%"), bg="darkred",
            ),
            front=Markup("<div><p>{}</p></div>").format(blurb),
            back=Markup(
                "<p>{}</p>"
                "<p>Provides character sheet support, dice rolling, and a number of "
                "automation features for The Burning Wheel. Based on the Burning Wheel "
                "Gold Revised rules available in the burning wheel store.</p>"
                '<p class="fw-bold">Author: <a href="https://github.com/StasTserk">'
                "Stas Tserkovny</a></p>"
                "<hr>"
                '<p class="fw-bold">{}</p>'
            ).format(blurb, _github("https://github.com/StasTserk/foundry-burningwheel")),
        ),
    ]


def about_card() -> Card:
    return Custom(
        header=None,
        image="/static/pb.png",
        content=Markup(
            "<div>"
            '<h1 class="bit mb-0" style="line-height: 2rem">Andreas Nilsson</h1>'
            '<h2 class="bit mt-0 mb-4 text-muted" style="line-height: 2rem">'
            "Web and Software Developer</h2>"
            "<hr>"
            "<p>Malmö-based millenial living with my SO and cats. Trying to grow "
            "habaneros on our roof terrace.</p>"
            "<p><b>Talk to me about</b></p>"
            '<ul style="line-height: 0.5rem">'
            "<p>🦀 All things code</p>"
            "<p>🎲 Tabletop RPGs</p>"
            "<p>🎵 Folk music and progressive metal</p>"
            "<p>🍻 Craft beers and whiskey</p>"
            "</ul>"
            "<p>I'm constantly looking for new tech and tools to help grow my coding and "
            "project management skills. Preferably by building digital tools for "
            "tabletop games!</p>"
            "</div>"
        ),
    )
