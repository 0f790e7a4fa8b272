#!/usr/bin/env python
"""
digit-groups CLI - Main entry point

Usage:
    # Format numbers with the default comma policy
    dg 1234567 -1234.5

    # Pick a predefined or saved policy
    dg --policy indian 1234567890

    # Ad-hoc policy, saved for later
    dg -g 3 --separator "'" --fraction-grouping 3 --save swiss 1234.56789

    # Free text, hex digits
    dg --policy hex --text deadbeef
"""

import sys
from decimal import Decimal
import click
from . import __version__
from .formatting import format_number, separate
from .policy import ConfigurationError, SeparatorPolicy
from .policies import PREDEFINED_POLICIES
from .settings import SettingsManager, resolve_policy
from rich.console import Console
from rich.table import Table
from rich import box

console = Console()


def parse_grouping(value: str) -> tuple[int, ...]:
    """
    Parse a comma separated list of group sizes

    Examples:
        "3" -> (3,)
        "3,2" -> (3, 2)
        "" -> ()

    Raises:
        ConfigurationError: If an entry is not an integer
    """
    sizes = []
    for part in value.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            sizes.append(int(part))
        except ValueError:
            raise ConfigurationError('grouping', f"'{part}' is not an integer") from None
    return tuple(sizes)


def parse_number(value: str) -> int | float | Decimal:
    """Parse a command line argument as int, falling back to float"""
    try:
        return int(value)
    except ValueError:
        digits = value.strip()
        if digits[:1] in ('+', '-'):
            digits = digits[1:]
        if digits.isdecimal():
            # Integer too long for int(); Decimal keeps every digit
            return Decimal(value)
        return float(value)


def describe_policy(policy: SeparatorPolicy) -> tuple[str, str, str, str]:
    """Format a policy as table cells: grouping, separator, decimal, fraction"""
    grouping = ','.join(str(size) for size in policy.grouping) or '-'
    if not policy.repeat_last and policy.grouping:
        grouping += ' (no repeat)'

    fraction = '-'
    if policy.fractional_grouping:
        sizes = ','.join(str(size) for size in policy.fractional_grouping)
        fraction = f"{sizes} {policy.effective_fractional_separator!r}"

    return grouping, repr(policy.digit_separator), repr(policy.decimal_separator), fraction


def show_policies(settings_manager: SettingsManager):
    """Print predefined and saved policies as a table"""
    table = Table(title="Separator Policies", box=box.ROUNDED)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Grouping", style="green")
    table.add_column("Separator", style="magenta")
    table.add_column("Decimal", style="magenta")
    table.add_column("Fraction", style="yellow")
    table.add_column("Example", style="bold")

    for name, policy in PREDEFINED_POLICIES.items():
        example = separate("deadbeefcafe", policy) if name == 'hex' else format_number(1234567.891, policy)
        table.add_row(name, *describe_policy(policy), example)

    for name in settings_manager.list_policies():
        try:
            policy = settings_manager.get_policy(name)
        except ConfigurationError as e:
            table.add_row(f"{name} [dim](saved)[/dim]", f"[red]invalid: {e}[/red]", "", "", "", "")
            continue
        table.add_row(f"{name} [dim](saved)[/dim]", *describe_policy(policy), format_number(1234567.891, policy))

    console.print(table)


@click.command(context_settings={'ignore_unknown_options': True})
@click.version_option(version=__version__)
@click.argument('values', nargs=-1, type=click.UNPROCESSED)
@click.option('-p', '--policy', 'policy_name', default='comma', show_default=True,
              help='Predefined or saved policy name')
@click.option('-g', '--grouping', help='Group sizes from the right, e.g. "3" or "3,2"')
@click.option('--separator', help='Separator between integer groups')
@click.option('--decimal-separator', help='Separator between integer and fraction')
@click.option('--fraction-grouping', help='Group sizes for the fraction, from the left')
@click.option('--fraction-separator', help='Separator between fraction groups (defaults to --separator)')
@click.option('--no-repeat', is_flag=True, help='Stop grouping once the group sizes run out')
@click.option('--text', 'as_text', is_flag=True, help='Treat values as text and group the first run of digits')
@click.option('--save', help='Save the resulting policy under this name')
@click.option('--delete', help='Delete a saved policy')
@click.option('--list-policies', is_flag=True, help='List predefined and saved policies')
def main(values, policy_name, grouping, separator, decimal_separator, fraction_grouping,
         fraction_separator, no_repeat, as_text, save, delete, list_policies):
    """
    digit-groups - Format numbers with digit group separators

    Examples:

    Default commas:
        dg 1234567

    Indian grouping:
        dg -p indian 1234567890

    List policies:
        dg --list-policies
    """
    settings_manager = SettingsManager()

    # List policies mode
    if list_policies:
        show_policies(settings_manager)
        return

    # Delete mode
    if delete:
        if settings_manager.delete_policy(delete):
            console.print(f"[green]✅ Deleted policy '{delete}'[/green]")
        else:
            console.print(f"[red]❌ Policy '{delete}' not found![/red]")
            sys.exit(1)
        return

    try:
        policy = resolve_policy(policy_name, settings_manager)

        changes = {}
        if grouping is not None:
            changes['grouping'] = parse_grouping(grouping)
        if separator is not None:
            changes['digit_separator'] = separator
        if decimal_separator is not None:
            changes['decimal_separator'] = decimal_separator
        if fraction_grouping is not None:
            changes['fractional_grouping'] = parse_grouping(fraction_grouping)
        if fraction_separator is not None:
            changes['fractional_separator'] = fraction_separator
        if no_repeat:
            changes['repeat_last'] = False
        if changes:
            policy = policy.replace(**changes)

    except KeyError as e:
        console.print(f"[red]❌ {e.args[0]}[/red]")
        console.print("[dim]Use --list-policies to see available policies[/dim]")
        sys.exit(1)
    except ConfigurationError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)

    if save:
        if save.strip().lower() in PREDEFINED_POLICIES:
            console.print(f"[red]❌ '{save}' is a built-in policy name, choose another[/red]")
            sys.exit(1)
        settings_manager.add_policy(save, policy)
        console.print(f"[green]✅ Saved policy '{save}'[/green]")

    if not values:
        if not save:
            console.print("[yellow]⚠ No values given[/yellow]")
            console.print("[dim]Run with --help for usage[/dim]")
        return

    for value in values:
        if as_text:
            click.echo(separate(value, policy))
            continue

        try:
            number = parse_number(value)
        except ValueError:
            console.print(f"[red]❌ Not a number: {value}[/red]")
            sys.exit(1)

        click.echo(format_number(number, policy))


if __name__ == '__main__':
    main()
