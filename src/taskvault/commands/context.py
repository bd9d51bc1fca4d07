"""Access to the per-process AppContext from inside a command."""

from __future__ import annotations

import typer

from taskvault.services.app_context import AppContext
from taskvault.services.config_service import get_config_service
from taskvault.utils.logger import get_logger
from taskvault.utils.ui.console import get_console


def get_app_context(ctx: typer.Context) -> AppContext:
    """Return the AppContext stored on the root Typer context.

    The context is built from the user's configuration on first use unless
    the caller already supplied one (``app(obj=AppContext(...))``).
    """
    root = ctx.find_root()
    if not isinstance(root.obj, AppContext):
        root.obj = AppContext.from_config_service(get_config_service())
        root.call_on_close(root.obj.close)

    app_ctx = root.obj
    get_logger(app_ctx.config.logging.level)
    get_console().no_color = not app_ctx.config.output.color
    return app_ctx


def resolve_output(ctx: typer.Context, output: str | None, json_opt: bool = False) -> str:
    """Pick the output format from flags, falling back to the config."""
    if json_opt:
        return "json"
    if output:
        return output
    return get_app_context(ctx).config.output.format
