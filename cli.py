#!/usr/bin/env python3
"""CLI for the Pokemon MCP server."""

import json
import logging
import sys
from pathlib import Path

import click

# Ensure pokemon_server is importable
sys.path.insert(0, str(Path(__file__).parent))

from pokemon_server.config import LOG_LEVEL, SERVER_VERSION
from pokemon_server.mcp.pokemon import PokemonServer


@click.group(invoke_without_command=True)
@click.version_option(version=SERVER_VERSION)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=LOG_LEVEL,
    help="Log level for stderr output (default: from LOG_LEVEL env)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str):
    """Pokemon MCP server - PokeAPI lookups over stdio.

    Runs the stdio server when no command is given.
    """
    # stderr only: stdout carries the protocol when serving
    logging.basicConfig(level=log_level.upper(), format="%(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        ctx.invoke(serve)


@cli.command("serve")
def serve():
    """Serve get_pokemon and compare_pokemon over stdin/stdout."""
    from pokemon_server.mcp.stdio import serve as serve_stdio

    try:
        serve_stdio(PokemonServer())
    except Exception as e:
        click.echo(f"Server error: {e}", err=True)
        sys.exit(1)


def _run_tool(name: str, args: dict) -> None:
    """Call a tool once and print its text, exiting 1 on failure."""
    server = PokemonServer()
    try:
        result = server.call_tool(name, args)
    finally:
        server.close()

    if not result.success:
        click.echo(result.to_string(), err=True)
        sys.exit(1)
    click.echo(result.to_string(), nl=False)


@cli.command("get")
@click.argument("name")
def get_pokemon(name: str):
    """Show information about a Pokemon.

    \b
    Examples:
      pokemon-server get pikachu
      pokemon-server get mr-mime
    """
    _run_tool("get_pokemon", {"name": name})


@cli.command("compare")
@click.argument("pokemon1")
@click.argument("pokemon2")
def compare_pokemon(pokemon1: str, pokemon2: str):
    """Compare the base stats of two Pokemon."""
    _run_tool("compare_pokemon", {"pokemon1": pokemon1, "pokemon2": pokemon2})


@cli.command("tools")
def list_tools():
    """Print the tool definitions as JSON."""
    server = PokemonServer()
    try:
        tools = [tool.to_mcp_format() for tool in server.list_tools()]
    finally:
        server.close()
    click.echo(json.dumps(tools, indent=2))


if __name__ == "__main__":
    cli()
