import io

import pytest

from pokedexcli.cli import clean_input, main, run_repl
from pokedexcli.commands import CommandError, Config
from pokedexcli.pokeapi import Pokemon


@pytest.mark.parametrize(
    "text, expected",
    [
        (" hello world ", ["hello", "world"]),
        ("one", ["one"]),
        ("", []),
        ("Pikachu BULBASAUR meowth", ["pikachu", "bulbasaur", "meowth"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_clean_input_collapses_repeated_spaces():
    assert clean_input("catch    Pikachu") == ["catch", "pikachu"]


def test_run_repl_unknown_and_blank_lines(capsys):
    run_repl(Config(client=None), ["", "   ", "bogus"])
    assert capsys.readouterr().out == (
        "Pokedex > Pokedex > Pokedex > Unknown command\nPokedex > "
    )


def test_run_repl_dispatches_case_insensitively(capsys):
    config = Config(client=None)
    config.pokedex["pikachu"] = Pokemon(name="pikachu")
    run_repl(config, ["POKEDEX\n"])
    assert capsys.readouterr().out == "Pokedex > - pikachu\nPokedex > "


def test_run_repl_strips_line_endings(capsys):
    config = Config(client=None)
    run_repl(config, ["inspect pikachu\r\n"])
    assert "you have not caught that pokemon" in capsys.readouterr().out


def test_run_repl_propagates_command_errors():
    with pytest.raises(CommandError, match="One \\(and only one\\) location name"):
        run_repl(Config(client=None), ["explore"])


def test_main_runs_help_until_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("help\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Pokedex > Welcome to the Pokedex!\n")
    assert out.endswith("Pokedex > ")


def test_main_reports_command_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("explore\n"))
    assert main([]) == 1
    assert "One (and only one) location name must be provided" in capsys.readouterr().err


def test_main_exit_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit\nhelp\n"))
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "Closing the Pokedex... Goodbye!" in out
    assert "Welcome to the Pokedex!" not in out