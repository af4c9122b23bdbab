#!/usr/bin/env python3
"""Generate CLI reference documentation from the typer app."""

import sys
from pathlib import Path

# Add parent directory to path to import vozfin
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
import typer

from vozfin.cli import app


def format_param(param: click.Parameter) -> str:
    """Format an option or argument with its flags and help text."""
    if isinstance(param, click.Argument):
        return f"- `{param.human_readable_name}` (required)"

    flag_str = ", ".join(f"`{flag}`" for flag in param.opts)
    parts = [f"- {flag_str}"]

    help_text = getattr(param, "help", None)
    if help_text:
        parts.append(f": {help_text}")

    if param.default is not None and param.default is not False:
        parts.append(f" (default: {param.default})")

    return "".join(parts)


def generate_command_doc(name: str, command: click.Command) -> str:
    """Generate documentation for a single command."""
    doc = (command.help or "No description available.").strip()

    lines = [
        f"### {name}",
        "",
        doc,
        "",
        "**Usage:**",
        "",
        "```bash",
        f"vozfin {name}",
        "```",
        "",
    ]

    arguments = [p for p in command.params if isinstance(p, click.Argument)]
    options = [p for p in command.params if isinstance(p, click.Option) and p.name != "help"]

    if arguments:
        lines.extend(["**Arguments:**", ""])
        lines.extend(format_param(p) for p in arguments)
        lines.append("")

    if options:
        lines.extend(["**Options:**", ""])
        lines.extend(format_param(p) for p in options)
        lines.append("")

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    group = typer.main.get_command(app)
    assert isinstance(group, click.Group)

    lines = [
        "# CLI Commands Reference",
        "",
        "Complete reference for all vozfin CLI commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "vozfin [GLOBAL OPTIONS] [COMMAND] [OPTIONS]",
        "```",
        "",
        "## Global Options",
        "",
        "| Option | Description |",
        "|--------|-------------|",
    ]
    for param in group.params:
        if isinstance(param, click.Option):
            lines.append(f"| `{', '.join(param.opts)}` | {param.help or ''} |")
    lines.extend(["| `--help` | Show help message and exit |", "", "## Commands", ""])

    for name in sorted(group.commands):
        lines.append(generate_command_doc(name, group.commands[name]))
        lines.append("")

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
