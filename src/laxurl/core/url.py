# LaxURL — Parsed URL value type
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from dataclasses import dataclass, fields


def _split_host_port(host: str):
	"""Split "host:port" into hostname and port.

	The port is only split off when everything after the last colon is digits,
	so a bare IPv6 literal like "[fd::1]" keeps its colons.
	"""
	i = host.rfind(":")
	if i != -1 and all(c in "0123456789" for c in host[i + 1:]):
		host, port = host[:i], host[i + 1:]
	else:
		port = ""
	if host.startswith("[") and host.endswith("]"):
		host = host[1:-1]
	return host, port


@dataclass(frozen=True)
class ParsedURL:
	"""Loosely parsed URL. An empty string means the component was absent."""

	scheme: str = ""
	host: str = ""
	path: str = ""
	raw_query: str = ""
	fragment: str = ""

	@property
	def hostname(self) -> str:
		return _split_host_port(self.host)[0]

	@property
	def port(self) -> str:
		return _split_host_port(self.host)[1]

	def is_empty(self) -> bool:
		return not any(getattr(self, f.name) for f in fields(self))

	def geturl(self) -> str:
		"""Render back to a string; the scheme prefix is left out when absent."""
		out = ""
		if self.scheme:
			out += self.scheme + "://"
		out += self.host + self.path
		if self.raw_query:
			out += "?" + self.raw_query
		if self.fragment:
			out += "#" + self.fragment
		return out

	def __str__(self) -> str:
		return self.geturl()
