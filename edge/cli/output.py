"""CLI output utilities and formatting."""

import logging

import click
from colorama import Fore, Style

BANNER = f"""
{Fore.YELLOW}╔══════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}EDGE{Style.RESET_ALL}                                   {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.WHITE}Content-addressed version control{Style.RESET_ALL}      {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚══════════════════════════════════════════╝{Style.RESET_ALL}
"""

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes through click.echo to stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(level: str) -> None:
    """
    Route the edge package loggers to stderr at the given level.

    Unknown level names fall back to WARNING.
    """
    logger = logging.getLogger('edge')
    numeric = logging.getLevelName(str(level).upper())
    logger.setLevel(numeric if isinstance(numeric, int) else logging.WARNING)

    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
