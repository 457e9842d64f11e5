"""Minimal URI handling for provider dispatch.

Only the parts the registry routes on are modelled: the scheme, the
scheme-specific part and the fragment. Anything deeper is left to the
provider that owns the scheme.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from .exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class WorkURI:
    """Immutable URI identifying a work.

    Two URIs are equal when their schemes match without regard to case and
    their scheme-specific parts and fragments match exactly, so ``hello:x``
    and ``HELLO:x`` name the same work.
    """

    raw: str = field(compare=False)
    scheme: str | None = field(compare=False)
    scheme_specific_part: str = field(compare=False)
    fragment: str | None = field(compare=False, default=None)
    _key: tuple[str | None, str, str | None] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        folded = self.scheme.casefold() if self.scheme is not None else None
        object.__setattr__(
            self, "_key", (folded, self.scheme_specific_part, self.fragment)
        )

    @property
    def routing_key(self) -> str:
        """The key used to pick a provider: the scheme, else the scheme-specific part."""
        if self.scheme is None:
            return self.scheme_specific_part
        return self.scheme

    def __str__(self) -> str:
        return self.raw


def parse_uri(value: str | WorkURI) -> WorkURI:
    """Parse ``value`` into a :class:`WorkURI`.

    Args:
        value: A URI string such as ``"hello:///greeting"`` or ``"hello"``,
            or an already-parsed ``WorkURI`` (returned unchanged).

    Returns:
        The parsed URI.

    Raises:
        InvalidArgumentError: If ``value`` is not a string, is blank, or has
            leading or trailing whitespace.
    """
    if isinstance(value, WorkURI):
        return value
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"URI must be a string, got {type(value).__name__}"
        )
    if not value.strip():
        raise InvalidArgumentError("URI must be a non-empty string")
    if value != value.strip():
        raise InvalidArgumentError(f"URI {value!r} has surrounding whitespace")

    body, sep, fragment = value.partition("#")
    try:
        parsed_scheme = urlsplit(body).scheme
    except ValueError as e:
        raise InvalidArgumentError(f"Malformed URI {value!r}: {e}") from e

    if parsed_scheme:
        # urlsplit lowercases the scheme; keep the literal text as written
        scheme: str | None = body[: len(parsed_scheme)]
        ssp = body[len(parsed_scheme) + 1 :]
    else:
        scheme = None
        ssp = body

    return WorkURI(
        raw=value,
        scheme=scheme,
        scheme_specific_part=ssp,
        fragment=fragment if sep else None,
    )
