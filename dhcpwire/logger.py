"""Loggers a DHCPv6 server uses to report messages and debugging output."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable

Output = Callable[[str], None]


def _stderr_output(line: str) -> None:
    stamp = time.strftime("%Y/%m/%d %H:%M:%S")
    sys.stderr.write(f"[dhcpv6] {stamp} {line}\n")


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def _summary(message: Any) -> str:
    summary = getattr(message, "summary", None)
    return summary() if callable(summary) else str(message)


class Logger(ABC):
    """Receives log lines and DHCP messages from a server."""

    @abstractmethod
    def printf(self, fmt: str, *args: Any) -> None:
        """Log a %-style formatted line."""

    @abstractmethod
    def print_message(self, prefix: str, message: Any) -> None:
        """Log a DHCP message with a prefix."""


class EmptyLogger(Logger):
    """A logger that discards everything."""

    def printf(self, fmt: str, *args: Any) -> None:
        pass

    def print_message(self, prefix: str, message: Any) -> None:
        pass


@dataclass
class ShortSummaryLogger(Logger):
    """Logs lines as given and messages in their one-line form."""

    output: Output = field(default=_stderr_output)

    def printf(self, fmt: str, *args: Any) -> None:
        self.output(_format(fmt, args))

    def print_message(self, prefix: str, message: Any) -> None:
        self.printf("%s: %s", prefix, message)


@dataclass
class DebugLogger(Logger):
    """Logs lines as given and messages in their long, multi-line form."""

    output: Output = field(default=_stderr_output)

    def printf(self, fmt: str, *args: Any) -> None:
        self.output(_format(fmt, args))

    def print_message(self, prefix: str, message: Any) -> None:
        self.printf("%s: %s", prefix, _summary(message))