"""
YAML reporter - writes the scan result as YAML
"""

import sys
from typing import TextIO

import yaml

from depextify.core.models import ScanResult
from depextify.reporters.base import ReportOptions


class YamlReporter:
    """YAML reporter"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def render(self, result: ScanResult, options: ReportOptions) -> str:
        data = result.to_data(show_pos=options.show_pos, show_count=options.show_count)
        return yaml.safe_dump(data, sort_keys=True, allow_unicode=True, default_flow_style=False)

    def report(self, result: ScanResult, options: ReportOptions) -> None:
        print(self.render(result, options), file=self.output, end="")
