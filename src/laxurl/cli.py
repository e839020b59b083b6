# LaxURL — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from dataclasses import asdict
from typing import List, Optional

import typer
from rich import print
from rich.markup import escape

from .config import Settings, check_sentinel
from .core.merge import merge as merge_urls
from .core.parse import MalformedURLError, parse as parse_url
from .logging_config import configure_logging

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _sentinel_option(value: Optional[str]) -> Optional[str]:
	if value is None:
		return value
	try:
		return check_sentinel(value)
	except ValueError as exc:
		raise typer.BadParameter(str(exc))


@app.command()
def parse(
	raw: List[str] = typer.Argument(..., help="Address string(s) to parse"),
	sentinel: Optional[str] = typer.Option(None, help="Override the injected sentinel scheme", callback=_sentinel_option),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Parse each address and print its components."""
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=cfg.log_dir)
	failed = False
	for r in raw:
		print(f"[bold]Parsing:[/bold] {escape(r)}")
		try:
			u = parse_url(r, sentinel=sentinel or cfg.sentinel)
		except MalformedURLError as exc:
			print(f"[red]error:[/red] {escape(str(exc))}")
			failed = True
			continue
		print(asdict(u))
	if failed:
		raise typer.Exit(code=1)


@app.command()
def merge(
	base: str = typer.Argument(..., help="Base address"),
	patch: str = typer.Argument(..., help="Address whose non-empty parts override base"),
	sentinel: Optional[str] = typer.Option(None, help="Override the injected sentinel scheme", callback=_sentinel_option),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Parse base and patch, then print base overlaid with patch."""
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=cfg.log_dir)
	token = sentinel or cfg.sentinel
	try:
		u = merge_urls(parse_url(base, sentinel=token), parse_url(patch, sentinel=token))
	except MalformedURLError as exc:
		print(f"[red]error:[/red] {escape(str(exc))}")
		raise typer.Exit(code=1)
	print(asdict(u))
	print(f"[bold]URL:[/bold] {escape(u.geturl())}")


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
