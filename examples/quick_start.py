#!/usr/bin/env python
"""
digit-groups - Quick Start Examples

Simple, runnable examples to get started quickly.
Run with: python examples/quick_start.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from digit_groups import (
    ConfigurationError,
    HEX_FOUR,
    INDIAN_SEPARATOR,
    Separable,
    SeparatorPolicy,
    format_number,
    separate
)
from rich.console import Console

console = Console()


def example_1_predefined():
    """Example 1: Predefined policies"""
    console.print("\n[bold cyan]Example 1: Predefined Policies[/bold cyan]")

    for value in [0, 999, 1000, 1234567, -1234.5]:
        console.print(f"{value!r:>10} -> {format_number(value)}")

    console.print(f"Indian: {format_number(1234567890, INDIAN_SEPARATOR)}")
    console.print(f"Hex:    {separate('deadbeef', HEX_FOUR)}")
    console.print(f"Spaces: {Separable(9876543.21).separate_with_spaces()}")


def example_2_custom_policy():
    """Example 2: Custom grouping and fractional digits"""
    console.print("\n[bold cyan]Example 2: Custom Policy[/bold cyan]")

    policy = SeparatorPolicy(
        grouping=(3,),
        digit_separator=" · ",
        fractional_grouping=(3,),
        fractional_separator=" "
    )
    console.print(format_number(3141592.653589, policy))

    # Without repetition, digits beyond the listed groups stay together
    once = policy.replace(grouping=(3, 2), repeat_last=False)
    console.print(format_number(1234567890, once))


def example_3_invalid_policy():
    """Example 3: Invalid policies are rejected up front"""
    console.print("\n[bold cyan]Example 3: Invalid Policy[/bold cyan]")

    try:
        SeparatorPolicy(grouping=(3, 0))
    except ConfigurationError as e:
        console.print(f"[red]✗ {e}[/red]")


if __name__ == "__main__":
    example_1_predefined()
    example_2_custom_policy()
    example_3_invalid_policy()
