"""
This module contains the IOInterface abstract base class and its implementations.

The game runner never prints directly. It writes narration lines to an
IOInterface, which decides where they end up: the console, a file, a list in
memory, or nowhere at all.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

import aiofiles


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the sink that game narration is written to.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def lines_starting_with(self, prefix):
        Return the collected messages that start with ``prefix``.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages: List[str] = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def lines_starting_with(self, prefix: str) -> List[str]:
        return [m for m in self.sent_messages if m.startswith(prefix)]


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface that prints every message to standard output.
    """

    def output(self, message: str) -> None:
        print(message, flush=True)


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    The file is truncated when the interface is created, so each game gets a
    fresh narration log.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path
        with open(self.log_file_path, "w", encoding="utf-8"):
            pass

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    async def output_async(self, message: str) -> None:
        """Async version of output for hosts running an event loop."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")


class CompositeIOInterface(IOInterface):
    """
    Fans every message out to several interfaces, in order.
    """

    def __init__(self, *interfaces: IOInterface):
        self.interfaces = interfaces

    def output(self, message: str) -> None:
        for interface in self.interfaces:
            interface.output(message)
