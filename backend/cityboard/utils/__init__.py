from .log_format import ExtraFormatter, configure_logging
from .timestamp import parse_timestamp, format_timestamp

__all__ = ["ExtraFormatter", "configure_logging", "parse_timestamp", "format_timestamp"]
