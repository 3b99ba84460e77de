import pytest

from holecard.blackjack.blackjack import create_io_interface, main, parse_args
from holecard.common.io_interface import ConsoleIOInterface, LoggingIOInterface


@pytest.fixture
def no_sleep(mocker):
    return mocker.patch("holecard.blackjack.blackjack.time.sleep")


def test_parse_args_defaults():
    args = parse_args([])
    assert args.pace == 1.0
    assert args.seed is None
    assert args.log_file is None
    assert args.log_level == "WARNING"


def test_parse_args_rejects_negative_pace():
    with pytest.raises(SystemExit):
        parse_args(["--pace", "-1"])


def test_create_io_interface_console():
    assert isinstance(create_io_interface(parse_args([])), ConsoleIOInterface)


def test_create_io_interface_with_log_file(tmp_path):
    args = parse_args(["--log_file", str(tmp_path / "game.log")])
    io_interface = create_io_interface(args)
    assert isinstance(io_interface, LoggingIOInterface)
    assert isinstance(io_interface.inner, ConsoleIOInterface)


def test_main_plays_a_round(mocker, capsys, no_sleep):
    mocker.patch("builtins.input", return_value="s")

    assert main(["--pace", "0", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert out.index("Shuffling cards..") < out.index("Dealing cards..")
    assert out.index("Dealing cards..") < out.index("The dealer reveals the hole card!")
    assert "Dealer card value:" in out
    assert "User card value:" in out
    no_sleep.assert_not_called()


def test_main_seed_makes_rounds_repeatable(mocker, capsys, no_sleep):
    mocker.patch("builtins.input", return_value="s")

    main(["--pace", "0", "--seed", "11"])
    first = capsys.readouterr().out
    main(["--pace", "0", "--seed", "11"])
    second = capsys.readouterr().out

    assert first == second


def test_main_records_transcript(mocker, tmp_path, no_sleep):
    mocker.patch("builtins.input", return_value="s")
    log_file = tmp_path / "game.log"

    assert main(["--pace", "0", "--seed", "5", "--log_file", str(log_file)]) == 0

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Shuffling cards.."
    assert "[INPUT] s" in lines
    assert lines[-1].startswith("User card value: ")


def test_main_aborts_on_end_of_input(mocker, capsys, no_sleep):
    mocker.patch("builtins.input", side_effect=EOFError)

    assert main(["--pace", "0", "--seed", "2"]) == 1
    assert "Game aborted." in capsys.readouterr().out
