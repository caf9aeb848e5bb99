"""Personal portfolio site: cards, pages and a secret toggle served by Flask."""

from .app import create_app

__all__ = ["create_app"]
