"""Defines the command-line interface for the pincheck application.

This module uses the `click` library to build the CLI and `rich` to render
results. It is a thin surface over `pypincheck.core.validator`: it loads the
configured rules, checks a PIN, and prints the outcome list.
"""
import io
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .core.config import Config, ConfigError, parse_flag_or_int
from .core.models import RuleConfiguration, ValidationOutcome
from .core.validator import enabled_rules, is_acceptable, validate

# Set up basic logging.
logger = logging.getLogger(__name__)

EXIT_VIOLATION = 1
EXIT_CONFIG_ERROR = 2


class AliasedGroup(click.Group):
    """A custom click Group that supports command aliases and case-insensitivity."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._aliases: Dict[str, str] = {}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Gets a command by name, checking for aliases and prefixes.

        Args:
            ctx: The click context.
            cmd_name: The command name entered by the user.

        Returns:
            The matched click command, or None.
        """
        cmd_name = cmd_name.lower()
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        if cmd_name in self._aliases:
            return super().get_command(ctx, self._aliases[cmd_name])
        matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
        if not matches:
            return None
        if len(matches) == 1:
            return super().get_command(ctx, matches[0])
        ctx.fail(f"Ambiguous command: '{cmd_name}'. Matches: {', '.join(sorted(matches))}")
        return None

    def add_alias(self, alias: str, command_name: str) -> None:
        self._aliases[alias.lower()] = command_name.lower()


def _make_console(config: Config) -> Console:
    return Console(no_color=not config.colors_enabled(), highlight=False)


def _load_rules(config_path: Optional[str]) -> Tuple[Config, RuleConfiguration]:
    """Loads the configuration and the rules it describes.

    Exits with status 2 if the configured rules are inconsistent.
    """
    config_obj = Config(config_path=config_path)
    try:
        return config_obj, config_obj.rule_configuration()
    except ConfigError as e:
        Console(stderr=True).print(f"[red]Invalid PIN rule configuration: {e}[/red]")
        sys.exit(EXIT_CONFIG_ERROR)


@click.group(cls=AliasedGroup, invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pypincheck")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Check PINs against configurable strength rules.

    pincheck rejects PINs that are easy to guess: keypad crosses, runs of
    odd or even digits, repeated digits or digit pairs, consecutive series,
    non-digit characters and out-of-range lengths.
    """
    if sys.platform == "win32" and isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding='utf-8')
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")

    if ctx.invoked_subcommand is None:
        click.echo("Use 'pincheck check' to validate a PIN, or 'pincheck --help' for more commands.")


@main.command()
@click.argument("pin", required=False)
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def check(pin: Optional[str], config_path: Optional[str], json_output: bool) -> None:
    """Validate a PIN against the configured rules.

    When PIN is omitted it is read from a hidden prompt, which keeps it out
    of the shell history. Exits with status 1 if any rule is violated.
    """
    config_obj, rules = _load_rules(config_path)
    if pin is None:
        pin = click.prompt("PIN", hide_input=True)

    outcomes = validate(pin, rules)
    accepted = is_acceptable(outcomes)

    if json_output:
        click.echo(json.dumps({
            "accepted": accepted,
            "outcomes": [outcome.to_dict() for outcome in outcomes],
        }, indent=2))
    else:
        _display_outcomes(_make_console(config_obj), outcomes, rules)

    if not accepted:
        sys.exit(EXIT_VIOLATION)


def _display_outcomes(console: Console, outcomes: List[ValidationOutcome], rules: RuleConfiguration) -> None:
    """Displays the outcome list as a table followed by a summary panel.

    Args:
        console: The rich console to print to.
        outcomes: The outcomes returned by the engine.
        rules: The rules the outcomes were computed with.
    """
    table = Table(title="PIN Rules")
    table.add_column("Rule", style="cyan")
    table.add_column("Kind")
    table.add_column("Status")
    for rule, outcome in zip(enabled_rules(rules), outcomes):
        status = "[red]Violated[/red]" if outcome.is_violated else "[green]Passed[/green]"
        table.add_row(rule.name, outcome.kind.value, status)
    console.print(table)

    violated = sum(1 for outcome in outcomes if outcome.is_violated)
    if violated:
        console.print(Panel(f"PIN rejected: {violated} rule(s) violated.", style="red", title="Result"))
    else:
        console.print(Panel("PIN accepted.", style="green", title="Result"))


@main.command()
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
def rules(config_path: Optional[str]) -> None:
    """List the rules a PIN is checked against."""
    config_obj, rule_config = _load_rules(config_path)
    table = Table(title="Enabled PIN Rules")
    table.add_column("Rule", style="cyan")
    table.add_column("Description")
    for rule in enabled_rules(rule_config):
        table.add_row(rule.name, rule.describe())
    _make_console(config_obj).print(table)


@main.command()
@click.argument("action", type=click.Choice(['get', 'set', 'list', 'reset']), required=True)
@click.argument("key", type=str, required=False)
@click.argument("value", type=str, required=False)
def config(action: str, key: Optional[str], value: Optional[str]) -> None:
    """Manage the pincheck configuration.

    This command allows you to view, set, and reset configuration values
    that are stored in the user-level configuration file.

    \b
    ACTION:
        get <key>         Get a configuration value.
        set <key> <value> Set a configuration value.
        list              List all current configuration values.
        reset             Reset the configuration to its default state.
    """
    config_obj = Config()
    console = _make_console(config_obj)
    err_console = Console(stderr=True)
    if action == "list":
        console.print(Panel(json.dumps(config_obj.config, indent=2), title="Current Configuration"))
    elif action == "get":
        if not key:
            err_console.print("[red]Error: 'get' action requires a key.[/red]")
            sys.exit(1)
        click.echo(json.dumps(config_obj.get(key)))
    elif action == "set":
        if not key or value is None:
            err_console.print("[red]Error: 'set' action requires a key and a value.[/red]")
            sys.exit(1)
        # Type casting for bools and ints
        if value.lower() in ('true', 'false', 'yes', 'no', 'on', 'off') or value.lstrip('-').isdigit():
            processed_value: Any = parse_flag_or_int(value)
        else:
            processed_value = value
        config_obj.set(key, processed_value)
        try:
            config_obj.rule_configuration()
        except ConfigError as e:
            err_console.print(f"[red]Refusing to save: {e}[/red]")
            sys.exit(EXIT_CONFIG_ERROR)
        try:
            config_obj.save_user_config()
            console.print(f"[green]'{key}' set to '{processed_value}' and saved to user config.[/green]")
        except IOError as e:
            err_console.print(f"[red]Error saving configuration: {e}[/red]")
            sys.exit(1)
    elif action == "reset":
        if Config.reset_user_config():
            console.print("[green]Configuration reset to defaults.[/green]")
        else:
            console.print("[yellow]No user configuration file to reset.[/yellow]")


main.add_alias('c', 'check')
main.add_alias('ls', 'rules')

if __name__ == "__main__":
    main()
