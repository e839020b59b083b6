# LaxURL — Strict parsing on top of urllib.parse
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import re
from typing import NamedTuple
from urllib.parse import urlsplit


logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class MalformedURLError(ValueError):
	"""Raised when the input cannot be parsed as a URL at all."""


class StrictURL(NamedTuple):
	"""urlsplit() result plus the opaque remainder.

	opaque holds whatever followed "scheme:" when it was not an authority and
	not an absolute path, e.g. "443/about" for "example.com:443/about".
	"""

	scheme: str
	netloc: str
	opaque: str
	path: str
	query: str
	fragment: str


def _check_escapes(value: str, part: str) -> None:
	m = _BAD_ESCAPE.search(value)
	if m:
		raise MalformedURLError(f"invalid URL escape {value[m.start():m.start() + 3]!r} in {part}")


def strict_split(raw: str) -> StrictURL:
	"""Split raw into components.

	Raises MalformedURLError on control characters (which urlsplit would
	silently drop), malformed IPv6 authorities, and broken percent escapes
	outside the query. Leading spaces are dropped, as newer urlsplit releases
	do on their own.
	"""
	m = _CONTROL_CHARS.search(raw)
	if m:
		raise MalformedURLError(f"invalid control character {raw[m.start()]!r} in URL")
	raw = raw.lstrip(" ")
	try:
		p = urlsplit(raw)
	except ValueError as exc:
		logger.debug("urlsplit rejected %r: %s", raw, exc)
		raise MalformedURLError(str(exc)) from exc

	opaque, path = "", p.path
	if p.scheme and not p.netloc and path and not path.startswith("/"):
		opaque, path = path, ""

	_check_escapes(p.netloc, "host")
	_check_escapes(path, "path")
	_check_escapes(p.fragment, "fragment")
	return StrictURL(p.scheme, p.netloc, opaque, path, p.query, p.fragment)


__all__ = [
	"MalformedURLError",
	"StrictURL",
	"strict_split",
]
