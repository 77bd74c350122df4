from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lcs.utils import LCSResult


class FormatterConfig:
    def __init__(
        self,
        show_headers: bool = True,
        show_solutions: bool = True,
        cell_width: Optional[int] = None,
        gutter_label: str = "-",
        indent: int = 2
    ):
        self.show_headers = show_headers
        self.show_solutions = show_solutions
        self.cell_width = cell_width
        self.gutter_label = gutter_label
        self.indent = indent

    def copy(self) -> 'FormatterConfig':
        return FormatterConfig(
            show_headers=self.show_headers,
            show_solutions=self.show_solutions,
            cell_width=self.cell_width,
            gutter_label=self.gutter_label,
            indent=self.indent
        )

    def with_cell_width(self, width: int) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.cell_width = width
        return cfg

    def without_headers(self) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.show_headers = False
        return cfg


class BaseFormatter(ABC):
    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self._lines: List[str] = []

    def format(self, result: LCSResult, r_seq: Sequence[str], c_seq: Sequence[str]) -> str:
        if len(result.table) != len(r_seq) + 1 or result.cols != len(c_seq) + 1:
            raise ValueError(
                f"Table is {result.rows}x{result.cols}, sequences need "
                f"{len(r_seq) + 1}x{len(c_seq) + 1}"
            )
        self._lines = []
        self._format_impl(result, r_seq, c_seq)
        return "\n".join(self._lines)

    @abstractmethod
    def _format_impl(self, result: LCSResult, r_seq: Sequence[str], c_seq: Sequence[str]):
        pass

    def _writeln(self, text: str = ""):
        self._lines.append(text)
