import pytest

from work_registry.exceptions import InvalidArgumentError
from work_registry.uri import WorkURI, parse_uri

pytestmark = pytest.mark.unit


class TestParseUri:
    """Scheme, scheme-specific part and fragment extraction"""

    def test_scheme_is_kept_as_written(self):
        uri = parse_uri("HeLLo:///team")
        assert uri.scheme == "HeLLo"
        assert uri.scheme_specific_part == "///team"
        assert uri.routing_key == "HeLLo"

    def test_missing_scheme_routes_on_scheme_specific_part(self):
        uri = parse_uri("hello")
        assert uri.scheme is None
        assert uri.scheme_specific_part == "hello"
        assert uri.routing_key == "hello"

    def test_fragment_is_split_off(self):
        uri = parse_uri("hello:world#intro")
        assert uri.scheme == "hello"
        assert uri.scheme_specific_part == "world"
        assert uri.fragment == "intro"

    def test_no_fragment_is_none(self):
        assert parse_uri("hello:world").fragment is None

    def test_opaque_uri(self):
        uri = parse_uri("sftp:user@host/path?name=logs")
        assert uri.scheme == "sftp"
        assert uri.scheme_specific_part == "user@host/path?name=logs"

    def test_surrounding_whitespace_is_rejected(self):
        with pytest.raises(InvalidArgumentError, match="whitespace"):
            parse_uri("  hello:x  ")
        with pytest.raises(InvalidArgumentError):
            parse_uri("hello:x\n")

    def test_parsed_uri_is_returned_unchanged(self):
        uri = parse_uri("hello:x")
        assert parse_uri(uri) is uri

    def test_str_is_raw_text(self):
        assert str(parse_uri("hello:///x")) == "hello:///x"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_uri_is_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            parse_uri(value)

    def test_non_string_is_rejected(self):
        with pytest.raises(InvalidArgumentError, match="int"):
            parse_uri(42)  # type: ignore[arg-type]

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            parse_uri("")


class TestWorkURIIdentity:
    """WorkURI is an immutable, hashable key"""

    def test_scheme_case_does_not_change_identity(self):
        assert parse_uri("hello:x") == parse_uri("HELLO:x")
        assert hash(parse_uri("hello:x")) == hash(parse_uri("HeLLo:x"))

    def test_raw_text_is_kept_as_written(self):
        assert parse_uri("HELLO:x").raw == "HELLO:x"

    @pytest.mark.parametrize(
        "other",
        ["hello:X", "hello:x#frag", "hello", "hi:x"],
        ids=["ssp-case", "fragment", "no-scheme", "other-scheme"],
    )
    def test_other_parts_are_compared_exactly(self, other):
        assert parse_uri("hello:x") != parse_uri(other)

    def test_usable_as_dict_key(self):
        cache = {parse_uri("hello:x"): 1}
        assert cache[parse_uri("hello:x")] == 1

    def test_is_frozen(self):
        uri = parse_uri("hello:x")
        with pytest.raises(AttributeError):
            uri.raw = "other"  # type: ignore[misc]

    def test_direct_construction(self):
        uri = WorkURI(raw="x", scheme=None, scheme_specific_part="x")
        assert uri.routing_key == "x"
        assert uri.fragment is None
