"""Public API for the plugman console output package."""

from .renderer import (
    console,
    end_action,
    error,
    render_plugins,
    render_update_result,
    start_action,
)

__all__ = [
    "console",
    "end_action",
    "error",
    "render_plugins",
    "render_update_result",
    "start_action",
]
