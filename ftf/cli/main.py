#!/usr/bin/env python3
"""
ftf CLI - Main entry point.

This module provides:
- `ftf fix`: correct a failed command (the chosen fix goes to stdout)
- `ftf rules`: list the built-in rules
- `ftf config`: example configuration and config file location
- `ftf alias`: shell integration function

Everything meant for humans goes to stderr so that stdout can be
evaluated by the shell.
"""
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from ftf import __version__
from ftf.config import FtfConfig, apply_config, default_config_path, example_config, load_config
from ftf.core.exceptions import ConfigError, ShellError
from ftf.core.types import Command, CorrectedCommand
from ftf.corrector import Corrector
from ftf.fuzzy import select_corrections
from ftf.rules.base import PriorityOverride
from ftf.rules.builders import FuzzyRule, RegexRule, SimpleRule
from ftf.rules.catalog import all_rules
from ftf.rules.catalog.hints import MessageGatedRule
from ftf.rules.registry import RuleRegistry
from ftf.shell import BashShell, alias_script
from ftf.utils.logger import setup_logger

console = Console(stderr=True)


def build_corrector(config: FtfConfig) -> Corrector:
    """Create a corrector holding the catalog rules kept by the config."""
    registry = RuleRegistry(apply_config(all_rules(), config))
    return Corrector(registry, max_workers=config.global_.max_workers)


def _get_config(ctx: click.Context) -> FtfConfig:
    """Load the configuration once per invocation, exiting on errors."""
    if ctx.obj.get("config") is None:
        try:
            ctx.obj["config"] = load_config(ctx.obj["config_path"])
        except ConfigError as e:
            console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
            sys.exit(2)
    return ctx.obj["config"]


def _select_interactive(corrections: list[CorrectedCommand]) -> CorrectedCommand | None:
    """Ask the user to pick a correction; None if cancelled."""
    console.print("\n[bold]Multiple corrections available:[/bold]")
    for index, correction in enumerate(corrections, start=1):
        console.print(f"  [cyan]{index}.[/cyan] {escape(correction.script)}")

    choices = [str(i) for i in range(1, len(corrections) + 1)]
    try:
        answer = Prompt.ask(
            f"\nSelect correction (1-{len(corrections)})",
            choices=choices,
            default="1",
            console=console,
        )
    except (KeyboardInterrupt, EOFError):
        return None

    return corrections[int(answer) - 1]


@click.group()
@click.version_option(version=__version__, prog_name="ftf")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Path to config file (defaults to ~/.config/ftf/config.yaml)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(ctx, config_path, verbose):
    """
    ftf - Fix the last failed shell command.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    # Configure logging early so rule loading stays quiet
    setup_logger(verbose=verbose)


@cli.command()
@click.option("--command", "script", required=True, help="The command that failed")
@click.option("--output", default="", help="The output/error message from the failed command")
@click.option("--exit-code", type=int, default=1, show_default=True,
              help="The exit code from the failed command")
@click.option("--no-interaction", is_flag=True, help="Print the best correction without asking")
@click.option("--execute", is_flag=True, help="Run the chosen correction and exit with its code")
@click.pass_context
def fix(ctx, script, output, exit_code, no_interaction, execute):
    """
    Suggest a correction for a failed command.

    Example: ftf fix --command "mkdir a/b" --output "No such file or directory" --exit-code 1
    """
    config = _get_config(ctx)
    if config.global_.debug and not ctx.obj["verbose"]:
        setup_logger(verbose=True)

    corrector = build_corrector(config)
    command = Command(script=script, output=output, exit_code=exit_code)
    corrections = select_corrections(corrector.get_corrections(command), config.global_.limit)

    if not corrections:
        console.print("[yellow]No corrections found[/yellow]")
        sys.exit(1)

    if len(corrections) == 1 or no_interaction or not config.global_.interactive:
        chosen = corrections[0]
    else:
        chosen = _select_interactive(corrections)
        if chosen is None:
            console.print("[yellow]Cancelled[/yellow]")
            sys.exit(1)

    if not execute:
        click.echo(chosen.script)
        return

    try:
        result = BashShell().execute(chosen.script)
    except ShellError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    click.echo(result.stdout, nl=False)
    click.echo(result.stderr, nl=False, err=True)
    sys.exit(result.exit_code)


def _rule_kind(rule) -> str:
    while isinstance(rule, (PriorityOverride, MessageGatedRule)):
        rule = rule.rule
    if isinstance(rule, SimpleRule):
        return "literal"
    if isinstance(rule, RegexRule):
        return "regex"
    if isinstance(rule, FuzzyRule):
        return "fuzzy"
    return "custom"


@cli.command()
@click.pass_context
def rules(ctx):
    """List built-in rules and whether the config enables them."""
    config = _get_config(ctx)
    enabled = {rule.name for rule in apply_config(all_rules(), config)}

    table = Table(title="Rules", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Priority", justify="right")
    table.add_column("Enabled")

    for rule in all_rules():
        override = config.get_rule_priority(rule.name)
        priority = override if override is not None else rule.priority
        status = "[green]yes[/green]" if rule.name in enabled else "[red]no[/red]"
        table.add_row(rule.name, _rule_kind(rule), str(priority), status)

    Console().print(table)


@cli.group()
def config():
    """Configuration helpers."""
    pass


@config.command("example")
def config_example():
    """Print a documented example configuration."""
    click.echo(example_config(), nl=False)


@config.command("path")
@click.pass_context
def config_path(ctx):
    """Print the config file location."""
    click.echo(str(ctx.obj["config_path"] or default_config_path()))


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def config_init(ctx, force):
    """Write the example configuration to the config file location."""
    path = Path(ctx.obj["config_path"] or default_config_path())
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists (use --force to overwrite)[/yellow]")
        sys.exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(example_config(), encoding="utf-8")
    console.print(f"[green]✅ Wrote {path}[/green]")


@cli.command()
@click.option("--name", default="ftf", show_default=True, help="Name of the shell function")
def alias(name):
    """
    Print the bash integration function.

    Add to ~/.bashrc: eval "$(ftf alias)"
    """
    click.echo(alias_script(name), nl=False)


def main():
    """Entry point for the ftf CLI."""
    cli()


if __name__ == "__main__":
    main()
