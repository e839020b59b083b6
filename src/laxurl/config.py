# LaxURL — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


DEFAULT_SENTINEL = "magicemphasisleader"
SCHEME_PATTERN = r"^[A-Za-z][A-Za-z0-9+.-]*$"
_SCHEME_RE = re.compile(SCHEME_PATTERN)


class Settings(BaseSettings):
	"""Process-wide settings with sane defaults.

	Environment variables are prefixed with LAXURL_. The sentinel is the scheme
	injected for inputs that have none; change it if your addresses could
	legitimately start with it.
	"""

	model_config = SettingsConfigDict(
		env_prefix="LAXURL_", env_file=".env", extra="ignore", validate_assignment=True
	)

	sentinel: str = Field(default=DEFAULT_SENTINEL, pattern=SCHEME_PATTERN)
	log_level: str = Field(default="INFO")
	log_dir: Optional[str] = Field(default=None)


def check_sentinel(token: str) -> str:
	"""Return token if urlsplit will read it as a scheme, else raise ValueError."""
	if not _SCHEME_RE.fullmatch(token):
		raise ValueError(f"sentinel {token!r} is not a valid URL scheme")
	return token


settings = Settings()
