"""Pytest configuration and shared fixtures."""

import io
import os
import sys

import pytest
from hypothesis import Verbosity, settings
from rich.console import Console

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def console():
    """Provide a plain-text console that records into a string buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def scripted_input():
    """
    Build a read_line callable that replays the given lines.

    Prompts are recorded on the returned callable's ``prompts`` list; running
    out of lines raises EOFError like a closed stdin.
    """

    def build(*lines: str):
        replies = iter(lines)
        prompts: list[str] = []

        def read_line(prompt: str) -> str:
            prompts.append(prompt)
            try:
                return next(replies)
            except StopIteration:
                raise EOFError from None

        read_line.prompts = prompts
        return read_line

    return build


@pytest.fixture
def int_str_limit():
    """Pin the int-to-str digit limit to the interpreter default of 4300."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int-to-str digit limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
