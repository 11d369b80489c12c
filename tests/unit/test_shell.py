"""Unit tests for the interactive shell."""

import pytest

from mathops import Failure, ParameterKind, Success
from mathops.shell import (
    GOODBYE,
    PAUSE_PROMPT,
    WELCOME,
    InputParseError,
    Shell,
    format_result,
    parse_value,
)


class TestParseValue:
    """Tests for parse_value."""

    def test_integer(self):
        assert parse_value(" 42 ", ParameterKind.INTEGER) == 42

    def test_negative_integer(self):
        assert parse_value("-7", ParameterKind.INTEGER) == -7

    def test_integer_rejects_fraction(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_value("2.5", ParameterKind.INTEGER)
        assert str(exc_info.value) == "Invalid integer: '2.5'"

    def test_number_keeps_whole_numbers_exact(self):
        value = parse_value("10", ParameterKind.NUMBER)
        assert value == 10
        assert isinstance(value, int)

    def test_number_float(self):
        assert parse_value("-0.25", ParameterKind.NUMBER) == -0.25

    @pytest.mark.parametrize("text", ["abc", "", "nan", "inf"])
    def test_number_rejects(self, text):
        with pytest.raises(InputParseError):
            parse_value(text, ParameterKind.NUMBER)

    def test_character_keeps_spaces(self):
        assert parse_value(" a", ParameterKind.CHARACTER) == " a"

    def test_character_drops_line_ending(self):
        assert parse_value("a\r\n", ParameterKind.CHARACTER) == "a"

    def test_operator_passthrough(self):
        assert parse_value("%", ParameterKind.OPERATOR) == "%"


class TestFormatResult:
    """Tests for format_result."""

    def test_single_line(self):
        assert format_result(Success("Prime")) == "Result: Prime"

    def test_failure(self):
        assert format_result(Failure("Error: x.")) == "Result: Error: x."

    def test_multi_line(self):
        assert format_result(Success("a\nb")) == "Result:\na\nb"


class TestShell:
    """Tests for the Shell loop."""

    def output(self, console) -> str:
        return console.file.getvalue()

    def test_exit_immediately(self, console, scripted_input):
        read_line = scripted_input("21")
        assert Shell(console=console, read_line=read_line).run() == 0
        text = self.output(console)
        assert WELCOME in text
        assert "Choose an Operation" in text
        assert "Check Prime Number" in text
        assert "21." in text
        assert GOODBYE in text

    def test_runs_operation_then_exits(self, console, scripted_input):
        read_line = scripted_input("9", "97", "", "21")
        Shell(console=console, read_line=read_line).run()
        assert "Result: Prime" in self.output(console)
        assert read_line.prompts == [
            "Enter your choice: ",
            "Enter a non-negative integer to check if it's prime: ",
            PAUSE_PROMPT,
            "Enter your choice: ",
        ]

    def test_reprompts_on_unparseable_input(self, console, scripted_input):
        read_line = scripted_input("16", "x", "12", "8", "21")
        Shell(console=console, read_line=read_line, pause=False).run()
        text = self.output(console)
        assert "Invalid integer: 'x'" in text
        assert "Result: 4" in text

    def test_library_failure_is_printed(self, console, scripted_input):
        read_line = scripted_input("15", "10", "/", "0", "21")
        Shell(console=console, read_line=read_line, pause=False).run()
        assert "Result: Error: Division by zero is not allowed." in self.output(console)

    def test_multiline_result(self, console, scripted_input):
        read_line = scripted_input("6", "3", "21")
        Shell(console=console, read_line=read_line, pause=False).run()
        text = self.output(console)
        assert "Result:\n3 x 1 = 3\n" in text
        assert "3 x 10 = 30" in text

    def test_calculator_whole_result_prints_without_fraction(self, console, scripted_input):
        read_line = scripted_input("15", "10", "/", "2", "21")
        Shell(console=console, read_line=read_line, pause=False).run()
        assert "Result: 5\n" in self.output(console)

    @pytest.mark.parametrize("choice", ["0", "22", "abc", ""])
    def test_invalid_choice(self, console, scripted_input, choice):
        read_line = scripted_input(choice, "21")
        Shell(console=console, read_line=read_line, pause=False).run()
        assert (
            "Invalid choice. Please enter a number between 1 and 21." in self.output(console)
        )

    def test_end_of_input_exits_cleanly(self, console, scripted_input):
        read_line = scripted_input("1")
        assert Shell(console=console, read_line=read_line).run() == 0
        assert GOODBYE in self.output(console)

    def test_keyboard_interrupt_exits_cleanly(self, console):
        def interrupted(prompt):
            raise KeyboardInterrupt

        assert Shell(console=console, read_line=interrupted).run() == 0
        assert GOODBYE in self.output(console)

    def test_vowel_failure_message(self, console, scripted_input):
        read_line = scripted_input("14", "ab", "21")
        Shell(console=console, read_line=read_line, pause=False).run()
        assert (
            "Result: Error: Input must be a single alphabet character (e.g., 'a', 'B')."
            in self.output(console)
        )

    def test_padded_letter_is_rejected(self, console, scripted_input):
        read_line = scripted_input("14", " a", "21")
        Shell(console=console, read_line=read_line, pause=False).run()
        assert "Result: Error: Input must be a single alphabet character" in self.output(console)

    @pytest.mark.parametrize(
        "lines",
        [("5", "2000"), ("20", "2", "20000")],
        ids=["factorial", "power"],
    )
    def test_huge_integer_result_is_reported(self, console, scripted_input, int_str_limit, lines):
        read_line = scripted_input(*lines, "21")
        assert Shell(console=console, read_line=read_line, pause=False).run() == 0
        text = self.output(console)
        assert "Result: Error: Result is too large to represent." in text
        assert GOODBYE in text
