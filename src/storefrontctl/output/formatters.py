"""Output mode selection for ServiceResult.

Results are rendered for humans (Rich), for scripts (``--quiet``, one id
per line) or for machines (``--json``, the full model).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from storefrontctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from storefrontctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
