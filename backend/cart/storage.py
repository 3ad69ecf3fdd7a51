"""
Where a cart keeps its lines between requests.

A storage holds a plain list of JSON-safe line dicts; the Cart owns the
meaning of those dicts.
"""

from django.conf import settings


class CartStorage:
    def load(self):
        raise NotImplementedError

    def save(self, lines):
        raise NotImplementedError

    def clear(self):
        self.save([])


class InMemoryCartStorage(CartStorage):
    """Keeps lines on the instance. For scripts and tests."""

    def __init__(self, lines=None):
        self._lines = list(lines or [])

    def load(self):
        return [dict(line) for line in self._lines]

    def save(self, lines):
        self._lines = [dict(line) for line in lines]


class SessionCartStorage(CartStorage):
    """Keeps lines in the client's Django session so the cart survives reloads."""

    def __init__(self, session, key=None):
        self.session = session
        self.key = key or settings.CART_SESSION_KEY

    def load(self):
        lines = self.session.get(self.key) or []
        return [dict(line) for line in lines if isinstance(line, dict)]

    def save(self, lines):
        self.session[self.key] = [dict(line) for line in lines]
        self.session.modified = True

    def clear(self):
        if self.key in self.session:
            del self.session[self.key]
            self.session.modified = True
