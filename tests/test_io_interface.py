import pytest

from holecard.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    LoggingIOInterface,
    TestIOInterface,
)


def test_dummy_io_interface_methods():
    interface = DummyIOInterface()

    assert interface.output("Test") is None
    assert interface.input("prompt") == "s"


def test_console_io_interface_methods(mocker, capsys):
    interface = ConsoleIOInterface()
    mocker.patch("builtins.input", side_effect=["h"])

    interface.output("Test message")
    assert capsys.readouterr().out == "Test message\n"
    assert interface.input("> ") == "h"


def test_test_io_interface_methods():
    interface = TestIOInterface(["h"])

    interface.output("Test")
    assert interface.sent_messages == ["Test"]

    interface.add_input("s")
    assert interface.input("first") == "h"
    assert interface.input("second") == "s"
    assert interface.prompts == ["first", "second"]

    with pytest.raises(ValueError):
        interface.input("third")


def test_logging_io_interface_records_output(tmp_path):
    log_file = tmp_path / "session.log"
    inner = TestIOInterface(["h"])
    interface = LoggingIOInterface(str(log_file), inner=inner)

    interface.output("Shuffling cards..")
    assert interface.input("") == "h"
    interface.output("You won!")

    assert log_file.read_text(encoding="utf-8").splitlines() == [
        "Shuffling cards..",
        "[INPUT] h",
        "You won!",
    ]
    assert inner.sent_messages == ["Shuffling cards..", "You won!"]


def test_logging_io_interface_defaults_to_standing(tmp_path):
    interface = LoggingIOInterface(str(tmp_path / "session.log"))
    assert interface.input("") == "s"



def test_logging_io_interface_writes_each_line_immediately(tmp_path):
    log_file = tmp_path / "session.log"
    interface = LoggingIOInterface(str(log_file))

    interface.output("Dealing cards..")
    assert log_file.read_text(encoding="utf-8") == "Dealing cards..\n"

    interface.output("You won!")
    assert log_file.read_text(encoding="utf-8") == "Dealing cards..\nYou won!\n"
    assert not hasattr(interface, "output_async")
