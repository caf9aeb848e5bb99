"""
Per-visitor view state kept in the Flask session.

- AppState: the secret reveal flag, flipped only through toggle_secret()
- SecretPackage: what the App hands down to Navbar -> SecretSwitch
- the home page counter value
"""

from __future__ import annotations

from dataclasses import dataclass

from flask import session, url_for

SECRET = "secret"
COUNTER = "counter"

COUNTER_STEPS = {"increment": 1, "decrement": -1}


@dataclass
class AppState:
    secret: bool = False

    def toggle_secret(self) -> bool:
        """Flip the flag and return the new value."""
        self.secret = not self.secret
        return self.secret


@dataclass(frozen=True)
class SecretPackage:
    """Read side and callback for the secret switch.

    ``toggler`` is the URL the switch posts to; one post is one toggle.
    """

    activated: bool
    toggler: str


def load_state() -> AppState:
    return AppState(secret=bool(session.get(SECRET, False)))


def save_state(state: AppState) -> None:
    session[SECRET] = state.secret


def secret_package(state: AppState) -> SecretPackage:
    return SecretPackage(
        activated=state.secret,
        toggler=url_for("portfolio.toggle_secret"),
    )


# ---------------- counter ----------------

def read_counter() -> int:
    try:
        return int(session.get(COUNTER, 0))
    except (TypeError, ValueError):
        return 0


def step_counter(op: str) -> int:
    """Apply ``increment``/``decrement`` to the stored value and return it."""
    value = read_counter() + COUNTER_STEPS[op]
    session[COUNTER] = value
    return value
