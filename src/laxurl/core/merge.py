# LaxURL — Overlay one parsed URL on another
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from dataclasses import fields, replace

from .url import ParsedURL


def merge(base: ParsedURL, patch: ParsedURL) -> ParsedURL:
	"""Copy base, overriding every field that patch has set."""
	changes = {f.name: getattr(patch, f.name) for f in fields(patch) if getattr(patch, f.name)}
	return replace(base, **changes)
