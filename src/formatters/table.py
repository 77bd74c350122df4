import json
from typing import Sequence

from formatters.base import BaseFormatter
from lcs.utils import LCSResult


class TableFormatter(BaseFormatter):
    """Plain-text grid of the DP table, columns labelled by c_seq and rows by r_seq."""

    def _format_impl(self, result: LCSResult, r_seq: Sequence[str], c_seq: Sequence[str]):
        width = self._cell_width(result)
        gutter = self.config.gutter_label
        if self.config.show_headers:
            labels = [gutter] + [str(ch) for ch in c_seq]
            self._writeln(" " * width + " " + " ".join(label.rjust(width) for label in labels))
        for i, row in enumerate(result.table):
            cells = " ".join(str(value).rjust(width) for value in row)
            if self.config.show_headers:
                label = gutter if i == 0 else str(r_seq[i - 1])
                self._writeln(f"{label.rjust(width)} {cells}")
            else:
                self._writeln(cells)
        if self.config.show_solutions:
            self._writeln()
            self._writeln(f"length: {result.length}")
            for solution in result.sorted_solutions():
                self._writeln(f"{' ' * self.config.indent}{solution!r}")

    def _cell_width(self, result: LCSResult) -> int:
        if self.config.cell_width is not None:
            return self.config.cell_width
        widest = max(len(str(result.length)), len(self.config.gutter_label))
        return max(1, widest)


class JSONFormatter(BaseFormatter):
    def _format_impl(self, result: LCSResult, r_seq: Sequence[str], c_seq: Sequence[str]):
        payload = {
            "rows": "".join(r_seq),
            "cols": "".join(c_seq),
            "length": result.length,
            "solutions": result.sorted_solutions(),
            "table": [list(row) for row in result.table],
        }
        if not self.config.show_solutions:
            del payload["solutions"]
        self._writeln(json.dumps(payload, indent=self.config.indent, ensure_ascii=False))


