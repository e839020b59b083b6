from laxurl.core.parse import parse
from laxurl.core.url import ParsedURL


def test_hostname_and_port():
	u = ParsedURL(host="example.com:443")
	assert u.hostname == "example.com"
	assert u.port == "443"


def test_ipv6_hostname():
	assert ParsedURL(host="[fd::1]:53").hostname == "fd::1"
	assert ParsedURL(host="[fd::1]:53").port == "53"
	assert ParsedURL(host="[fd::1]").hostname == "fd::1"
	assert ParsedURL(host="[fd::1]").port == ""


def test_port_only():
	u = ParsedURL(host=":53")
	assert u.hostname == ""
	assert u.port == "53"


def test_geturl():
	assert parse("tcp://some.server:1234/coolthings/mine?t=fb#thing").geturl() == "tcp://some.server:1234/coolthings/mine?t=fb#thing"
	assert str(parse("example.com:443/about")) == "example.com:443/about"
	assert str(ParsedURL()) == ""


def test_geturl_reparses():
	for raw in [":2233/final/count", "[fd::1]:53/x", "10.20.30.40/admin?a=b", "udp://[fd::1]:80/admin"]:
		u = parse(raw)
		assert parse(u.geturl()) == u
