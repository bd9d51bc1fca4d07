"""Configuration commands."""

import json
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from taskvault.exceptions import ValidationError
from taskvault.services.config_service import get_config_service
from taskvault.utils.typer_helpers import SuggestingGroup
from taskvault.utils.ui.console import get_console
from taskvault.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")
console = get_console()


@app.command("show")
@command_wrapper
def show() -> None:
    """Show the whole configuration."""
    console.print_json(get_config_service().config.model_dump_json())


@app.command("get")
@command_wrapper
def get(key: Annotated[str, typer.Argument(help="Dotted key, e.g. storage.backend")]) -> None:
    """Show one configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise ValidationError(f"Unknown config key '{key}'") from e
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    console.print(json.dumps(value))


@app.command("set")
@command_wrapper
def set_value(
    key: Annotated[str, typer.Argument(help="Dotted key, e.g. output.format")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Change one configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError as e:
        raise ValidationError(f"Unknown config key '{key}'") from e
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid value for '{key}': {value}") from e
    format_success(f"{key} = {value}")


@app.command("reset")
@command_wrapper
def reset(
    key: Annotated[str | None, typer.Argument(help="Key to reset (default: all)")] = None,
) -> None:
    """Reset configuration to defaults."""
    try:
        get_config_service().reset(key)
    except (KeyError, AttributeError) as e:
        raise ValidationError(f"Unknown config key '{key}'") from e
    format_success(f"Reset {key or 'configuration'} to defaults")
