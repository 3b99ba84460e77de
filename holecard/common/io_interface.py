"""
This module contains the IOInterface abstract base class and its implementations.

The game only ever talks to the outside world through an IOInterface: it
writes whole lines with `output` and reads whole lines with `input`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for line-based input/output in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get a line of input from the user with a prompt."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    Every question is answered with "s", so a player driven by this
    interface always stands.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return "s"


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    replays queued input lines in order.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next queued input line.

    def add_input(self, *lines):
        Queue one or more input lines.
    """

    __test__ = False

    def __init__(self, input_responses: Optional[list[str]] = None):
        self.sent_messages: list[str] = []
        self.prompts: list[str] = []
        self.input_responses: list[str] = list(input_responses or [])

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise ValueError("No more input left in TestIOInterface queue.")

    def add_input(self, *lines: str) -> None:
        """Queue input lines to be returned by `input`."""
        self.input_responses.extend(lines)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes every output message
    to a transcript file.

    Output is also passed on to `inner`, and input is read from it, so a
    console session can be recorded as it is played. Without an inner
    interface the session is played silently by a DummyIOInterface.
    """

    def __init__(self, log_file_path: str, inner: Optional[IOInterface] = None):
        self.log_file_path = log_file_path
        self.inner = inner if inner is not None else DummyIOInterface()

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")
        self.inner.output(message)

    def input(self, prompt: str) -> str:
        """Read a line from the inner interface and record it."""
        response = self.inner.input(prompt)
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(f"[INPUT] {response}\n")
        return response

