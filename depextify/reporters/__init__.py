"""
Reporters Layer

Rich text reporter plus JSON and YAML serializers.
"""

from depextify.reporters.base import (
    DEFAULT_LEXER,
    DEFAULT_STYLE,
    Reporter,
    ReportOptions,
)
from depextify.reporters.rich_reporter import RichReporter
from depextify.reporters.json_reporter import JsonReporter
from depextify.reporters.yaml_reporter import YamlReporter

OUTPUT_FORMATS = ("text", "json", "yaml")


def get_reporter(output_format: str) -> Reporter:
    """Reporter for an output format name (text, json or yaml)."""
    if output_format == "json":
        return JsonReporter()
    if output_format == "yaml":
        return YamlReporter()
    if output_format == "text":
        return RichReporter()
    raise ValueError(f"unknown output format: {output_format}")


__all__ = [
    "DEFAULT_LEXER",
    "DEFAULT_STYLE",
    "OUTPUT_FORMATS",
    "Reporter",
    "ReportOptions",
    "RichReporter",
    "JsonReporter",
    "YamlReporter",
    "get_reporter",
]
