import logging
from collections.abc import MutableMapping
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)

COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class CookieStore(MutableMapping):
    """
    Plain cookies of one request, values percent-encoded on the wire.

    The page script writes the same cookie on every keystroke, so the browser
    holds the newest value before any lookup starts. Server-side writes are
    collected and attached to the response with apply().
    """

    def __init__(self, cookies, max_age=COOKIE_MAX_AGE):
        self._values = {key: unquote(value) for key, value in cookies.items()}
        self._written = set()
        self.max_age = max_age

    def __getitem__(self, key):
        return self._values[key]

    def __setitem__(self, key, value):
        self._values[key] = value
        self._written.add(key)

    def __delitem__(self, key):
        del self._values[key]
        self._written.add(key)

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def apply(self, response):
        for key in self._written:
            if key in self._values:
                response.set_cookie(
                    key, quote(self._values[key], safe=""),
                    max_age=self.max_age, samesite="Lax",
                )
            else:
                response.delete_cookie(key, samesite="Lax")
        return response


class PersistedInput:
    """
    The last country name typed, kept in a durable mapping.

    `store` is any mutable mapping: a CookieStore in the web app,
    a plain dict in tests. Writes go straight through, observers are called
    synchronously after the store has been updated.
    """

    def __init__(self, store, key="country", default=""):
        self._store = store
        self.key = key
        self.default = default
        self._observers = []

    @property
    def value(self) -> str:
        return self._store.get(self.key, self.default)

    def set(self, value: str):
        previous = self.value
        self._store[self.key] = value
        if value == previous:
            return
        logger.debug("Input changed from %r to %r", previous, value)
        for callback in list(self._observers):
            callback(value)

    def subscribe(self, callback):
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe
