# LaxURL — Lax parsing: sentinel rewrite, strict split, host recovery
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

"""More forgiving URL parsing for addresses typed by humans.

	raw                   | scheme | host            | path
	----------------------+--------+-----------------+--------
	net://example/simple  | net    | example         | /simple
	example.com:443/about |        | example.com:443 | /about
	:443                  |        | :443            |
	example.com           |        | example.com     |
	[fd::1]:53            |        | [fd::1]:53      |

urlsplit() on its own reads "example.com:443" as scheme "example.com" and
":443" as nothing useful. Inputs that would confuse it get a sentinel scheme
injected first, and the host is pulled back out of the opaque remainder or the
first path segment afterwards.
"""

import logging
from typing import Optional

from ..config import check_sentinel, settings
from .strict import MalformedURLError, StrictURL, strict_split
from .url import ParsedURL


logger = logging.getLogger(__name__)


def preprocess(raw: str, sentinel: str) -> str:
	"""Inject the sentinel scheme for bare ports and scheme-less IPv6 hosts."""
	if raw.startswith(":"):
		# starts with a port
		return sentinel + raw
	if raw.startswith("["):
		close = raw.find("]")
		if close == -1:
			return raw
		slash = raw.find("/")
		# a slash before the closing bracket means this is not a leading IPv6 literal
		if slash == -1 or slash > close:
			return sentinel + "://" + raw
	return raw


def postprocess(strict: StrictURL, sentinel: str) -> ParsedURL:
	"""Recover a host the strict parser missed and drop the sentinel."""
	# urlsplit lower-cases schemes
	token = sentinel.lower()
	scheme, host, path = strict.scheme, strict.netloc, strict.path

	if not host:
		if strict.opaque:
			first, sep, rest = strict.opaque.partition("/")
			host = scheme + ":" + first
			scheme = ""
			if sep:
				path = "/" + rest
		else:
			first, sep, rest = path.partition("/")
			host = first
			path = "/" + rest if sep else ""

	if scheme == token:
		scheme = ""
	if token and host.startswith(token):
		host = host[len(token):]

	return ParsedURL(
		scheme=scheme,
		host=host,
		path=path,
		raw_query=strict.query,
		fragment=strict.fragment,
	)


def parse(raw: str, sentinel: Optional[str] = None) -> ParsedURL:
	"""Parse a loosely written URL.

	sentinel overrides settings.sentinel for this call and must be a valid URL
	scheme (ValueError otherwise). Raises MalformedURLError when the rewritten
	input is not a URL at all.
	"""
	token = check_sentinel(sentinel) if sentinel else settings.sentinel
	rewritten = preprocess(raw, token)
	if rewritten != raw:
		logger.debug("rewrote %r as %r", raw, rewritten)
	return postprocess(strict_split(rewritten), token)


__all__ = [
	"MalformedURLError",
	"parse",
	"postprocess",
	"preprocess",
]
