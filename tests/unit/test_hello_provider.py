from concurrent.futures import ThreadPoolExecutor

import pytest

from work_registry.exceptions import InvalidArgumentError
from work_registry.providers.hello import HelloOptions, HelloWork, HelloWorkProvider
from work_registry.uri import parse_uri


@pytest.fixture
def provider() -> HelloWorkProvider:
    return HelloWorkProvider()


class TestHelloWorkProvider:
    """Caching and option handling of the hello provider"""

    @pytest.mark.unit
    def test_scheme(self, provider):
        assert provider.scheme() == "hello"
        assert repr(provider) == "HelloWorkProvider(scheme='hello')"

    @pytest.mark.unit
    def test_new_then_get_is_identical(self, provider):
        uri = parse_uri("hello:///team")
        created = provider.new_work(uri, {})
        assert provider.get_work(uri) is created

    @pytest.mark.unit
    def test_new_work_reuses_existing_work(self, provider):
        uri = parse_uri("hello:///team")
        first = provider.new_work(uri, {"greeting": "Hi"})
        second = provider.new_work(uri, {"greeting": "Howdy"})
        assert second is first
        assert second.greeting == "Hi"

    @pytest.mark.unit
    def test_get_work_miss_creates_with_defaults(self, provider):
        uri = parse_uri("hello:///fresh")
        work = provider.get_work(uri)
        assert isinstance(work, HelloWork)
        assert work.greeting == "Hello"
        assert provider.new_work(uri, {}) is work

    @pytest.mark.unit
    def test_distinct_uris_get_distinct_works(self, provider):
        a = provider.new_work(parse_uri("hello:a"), {})
        b = provider.new_work(parse_uri("hello:b"), {})
        assert a is not b

    @pytest.mark.unit
    def test_work_knows_its_provider_and_uri(self, provider):
        uri = parse_uri("hello:///team")
        work = provider.new_work(uri, {})
        assert work.provider() is provider
        assert work.uri is uri

    @pytest.mark.unit
    def test_execute_returns_greeting(self, provider, caplog):
        work = provider.new_work(parse_uri("hello:///team"), {"greeting": "Hi"})
        with caplog.at_level("INFO", logger="work_registry.providers.hello"):
            assert work.execute() == "Hi from hello:///team"
        assert "Hi from hello:///team" in caplog.text

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "options",
        [{"greeting": ""}, {"greeting": 42}, {"colour": "red"}],
        ids=["empty", "not-a-string", "unknown-key"],
    )
    def test_invalid_options_are_rejected(self, provider, options):
        with pytest.raises(InvalidArgumentError):
            provider.new_work(parse_uri("hello:x"), options)

    @pytest.mark.unit
    def test_rejected_options_do_not_cache(self, provider):
        uri = parse_uri("hello:x")
        with pytest.raises(InvalidArgumentError):
            provider.new_work(uri, {"greeting": ""})
        assert provider.get_work(uri).greeting == "Hello"

    @pytest.mark.unit
    def test_concurrent_creation_yields_one_work(self, provider):
        uri = parse_uri("hello:///shared")
        with ThreadPoolExecutor(max_workers=8) as pool:
            works = list(pool.map(lambda _: provider.new_work(uri, {}), range(64)))
        assert all(w is works[0] for w in works)


@pytest.mark.unit
def test_options_model_defaults():
    assert HelloOptions().greeting == "Hello"
