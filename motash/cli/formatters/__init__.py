from motash.cli.formatters.failure_formatter import format_failures

__all__ = ["format_failures"]
