from collections.abc import Iterator, Mapping
import threading
import time
from typing import Any

from work_registry.discovery import StaticDiscovery
from work_registry.provider import WorkProvider
from work_registry.uri import WorkURI
from work_registry.work import Work


class StubWork(Work):
    """Work that remembers the options it was created with."""

    def __init__(self, provider: "StubProvider", uri: WorkURI, options: dict[str, Any]):
        self._provider = provider
        self._uri = uri
        self.options = options

    @property
    def uri(self) -> WorkURI:
        return self._uri

    def provider(self) -> "StubProvider":
        return self._provider

    def execute(self) -> tuple[str, str]:
        return (self._provider.scheme(), self._uri.raw)


class StubProvider(WorkProvider):
    """Provider with a strict ``get_work``: misses raise KeyError."""

    def __init__(self, scheme: str = "stub") -> None:
        self._scheme = scheme
        self.works: dict[WorkURI, StubWork] = {}
        self.received_options: list[Mapping[str, Any]] = []

    def scheme(self) -> str:
        return self._scheme

    def new_work(self, uri: WorkURI, options: Mapping[str, Any]) -> StubWork:
        self.received_options.append(options)
        work = StubWork(self, uri, dict(options))
        self.works[uri] = work
        return work

    def get_work(self, uri: WorkURI) -> StubWork:
        return self.works[uri]


def stub_factory(scheme: str):
    """Return a zero-argument factory for a StubProvider serving ``scheme``."""

    def factory() -> StubProvider:
        return StubProvider(scheme)

    factory.__qualname__ = f"stub_factory({scheme!r})"
    return factory


class CountingSource:
    """Discovery source that counts passes and can be slowed down."""

    def __init__(self, *declarations: Any, delay: float = 0.0) -> None:
        self._inner = StaticDiscovery(*declarations)
        self._delay = delay
        self._lock = threading.Lock()
        self.calls = 0

    def discover(self) -> Iterator[WorkProvider]:
        with self._lock:
            self.calls += 1
        if self._delay:
            time.sleep(self._delay)
        yield from self._inner.discover()
