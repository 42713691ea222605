"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROGRAM_NAME = "typeorm_to_interface"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    # Try to get current Click context for parameter values
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return PROGRAM_NAME

    if not cli_args:
        return PROGRAM_NAME

    cmd_parts = [PROGRAM_NAME]

    for param in click_command.params:
        if not isinstance(param, click.Option) or param.name not in cli_args:
            continue

        value = cli_args[param.name]
        if value is None or value == param.default:
            continue

        # Boolean flags: --prefix / --no-prefix
        if param.is_flag:
            if value:
                cmd_parts.append(param.opts[0])
            elif param.secondary_opts:
                cmd_parts.append(param.secondary_opts[0])
            continue

        # Format value (convert file paths to just filenames for cleaner display)
        if isinstance(value, (str, Path)):
            path_obj = Path(str(value))
            formatted_value = path_obj.name if path_obj.exists() else str(value)
        else:
            formatted_value = str(value)

        # Get the primary option name (first in opts list)
        flag = param.opts[0] if param.opts else f"--{param.name}"
        cmd_parts.extend([flag, formatted_value])

    return " ".join(cmd_parts)
