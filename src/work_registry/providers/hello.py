"""The ``hello`` provider: a minimal provider that greets.

Works are cached per URI. ``get_work`` falls back to creating the work when
it has not been seen, which is a policy of this provider; a stricter one
could raise instead.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
import threading
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from work_registry.exceptions import InvalidArgumentError
from work_registry.provider import WorkProvider
from work_registry.uri import WorkURI
from work_registry.work import Work

log = logging.getLogger(__name__)


class HelloOptions(BaseModel):
    """Options accepted by :meth:`HelloWorkProvider.new_work`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    greeting: str = Field(default="Hello", min_length=1)


class HelloWork(Work):
    """A work that produces a greeting for its URI."""

    def __init__(self, provider: HelloWorkProvider, uri: WorkURI, greeting: str) -> None:
        self._provider = provider
        self._uri = uri
        self.greeting = greeting

    @property
    def uri(self) -> WorkURI:
        return self._uri

    def provider(self) -> HelloWorkProvider:
        return self._provider

    def execute(self) -> str:
        """Log and return the greeting line."""
        message = f"{self.greeting} from {self._uri}"
        log.info("%s", message)
        return message

    def __repr__(self) -> str:
        return f"HelloWork(uri={self._uri.raw!r}, greeting={self.greeting!r})"


class HelloWorkProvider(WorkProvider):
    """Provider for the ``hello`` scheme."""

    def __init__(self) -> None:
        self._works: dict[WorkURI, HelloWork] = {}
        self._lock = threading.Lock()

    def scheme(self) -> str:
        return "hello"

    def new_work(self, uri: WorkURI, options: Mapping[str, Any]) -> HelloWork:
        """Return the cached work for ``uri``, creating it on first sight.

        Options only apply when the work is created.

        Raises:
            InvalidArgumentError: If ``options`` has unknown keys or an empty
                or non-string ``greeting``.
        """
        try:
            settings = HelloOptions.model_validate(dict(options or {}))
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid options for {uri}: {e}") from e

        with self._lock:
            work = self._works.get(uri)
            if work is None:
                work = HelloWork(self, uri, settings.greeting)
                self._works[uri] = work
                log.debug("Created %r", work)
        return work

    def get_work(self, uri: WorkURI) -> HelloWork:
        with self._lock:
            work = self._works.get(uri)
        if work is not None:
            return work
        return self.new_work(uri, {})
