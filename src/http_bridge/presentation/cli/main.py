from __future__ import annotations

import asyncio
import json

import typer

from http_bridge.config import settings
from http_bridge.logging_config import configure_logging
from http_bridge.presentation.commands import make_request

app = typer.Typer(help="HTTP Bridge CLI")


def _parse_header(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise typer.BadParameter(f"expected 'Name: value', got {raw!r}")
    return name.strip(), value.strip()


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level", "-l")) -> None:
    configure_logging(log_level)


@app.command()
def send(
    method: str = typer.Argument(...),
    url: str = typer.Argument(...),
    header: list[str] = typer.Option([], "--header", "-H"),
    data: str | None = typer.Option(None, "--data", "-d"),
) -> None:
    headers = dict(_parse_header(h) for h in header)
    result = asyncio.run(make_request(method, url, headers, data))
    if not result.ok or result.response is None:
        typer.echo(f"{result.status}: {result.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(result.response.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port", "-p"),
) -> None:
    import uvicorn

    uvicorn.run("http_bridge.presentation.api.main:app", host=host, port=port)


if __name__ == "__main__":
    app()
