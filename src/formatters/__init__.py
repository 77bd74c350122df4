from typing import Dict, List

from formatters.base import BaseFormatter, FormatterConfig
from formatters.table import TableFormatter, JSONFormatter


__all__ = [
    "BaseFormatter", "FormatterConfig", "TableFormatter", "JSONFormatter",
    "FORMATTERS", "create_formatter", "get_available_formatters", "format_result"
]


FORMATTERS: Dict[str, type] = {
    "table": TableFormatter,
    "json": JSONFormatter,
}


def create_formatter(name: str, config: FormatterConfig = None) -> BaseFormatter:
    if name not in FORMATTERS:
        raise ValueError(f"Unknown formatter: {name}")
    return FORMATTERS[name](config)


def get_available_formatters() -> List[str]:
    return list(FORMATTERS)


def format_result(result, r_seq, c_seq, formatter_name: str = "table",
                  config: FormatterConfig = None) -> str:
    return create_formatter(formatter_name, config).format(result, r_seq, c_seq)
