"""Output renderers for search results.

Exports the OutputWriter interface, the console/JSON/HTML writers, and a
factory building the configured combination.
"""

from __future__ import annotations

from WikiGrep.config import AppConfig
from WikiGrep.renderers.base import MultiOutputWriter, OutputError, OutputWriter
from WikiGrep.renderers.console import ConsoleOutputWriter
from WikiGrep.renderers.html import HtmlFileWriter, render_panel
from WikiGrep.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Raises:
        ValueError: If no writer is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))
    if "html" in config.output.formats:
        writers.append(HtmlFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "OutputError",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "HtmlFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_panel",
    "create_output_writer",
]
