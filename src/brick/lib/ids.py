import itertools
import re
from collections.abc import Callable
from uuid import uuid4

IdFactory = Callable[[], str]

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[\s_]+")
_NON_SLUG = re.compile(r"[^\w-]")
_DASH_RUNS = re.compile(r"-{2,}")


def uuid_id() -> str:
    return str(uuid4())


def slugify(title: str) -> str:
    slug = _CAMEL_BOUNDARY.sub(r"\1-\2", title.strip())
    slug = _SEPARATORS.sub("-", slug).lower()
    slug = _NON_SLUG.sub("", slug)
    return _DASH_RUNS.sub("-", slug).strip("-")


class SequentialIds:
    """Deterministic id strategy: ``id-1``, ``id-2``, ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"
