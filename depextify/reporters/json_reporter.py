"""
JSON reporter - writes the scan result as JSON
"""

import json
import sys
from typing import TextIO

from depextify.core.models import ScanResult
from depextify.reporters.base import ReportOptions


class JsonReporter:
    """JSON reporter"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def render(self, result: ScanResult, options: ReportOptions) -> str:
        data = result.to_data(show_pos=options.show_pos, show_count=options.show_count)
        return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True)

    def report(self, result: ScanResult, options: ReportOptions) -> None:
        print(self.render(result, options), file=self.output)
