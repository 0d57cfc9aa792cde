"""Commands available at the Pokedex prompt."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Any, Callable

from .pokeapi import PokeAPIError, Pokemon

CATCH_RANGE = 200


class CommandError(Exception):
    """Raised when a command cannot complete."""


@dataclass
class Config:
    """State shared between commands."""

    client: Any
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    next_locations_url: str = ""
    prev_locations_url: str = ""
    rng: Any = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and handler."""

    name: str
    description: str
    callback: Callable[..., None]


def command_help(config: Config, *args: str) -> None:
    """Print the list of commands."""
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")


def command_catch(config: Config, *args: str) -> None:
    """Try to catch each named Pokemon."""
    for name in args:
        print(f"Throwing a Pokeball at {name}...")
        try:
            pokemon = config.client.get_pokemon(name)
        except PokeAPIError as exc:
            raise CommandError(f"Could not get Pokemon information for {name}") from exc

        chance = CATCH_RANGE
        if pokemon.base_experience >= chance:
            chance = 1
        elif pokemon.base_experience > 0:
            chance -= pokemon.base_experience

        if config.rng.randrange(CATCH_RANGE) < chance:
            print(f"{name} was caught!")
            config.pokedex[name] = pokemon
            print(f"Type 'inspect {name}' to see its details")
        else:
            print(f"{name} escaped!")


def command_explore(config: Config, *args: str) -> None:
    """List the Pokemon found in one location area."""
    if len(args) != 1:
        raise CommandError("One (and only one) location name must be provided")
    try:
        location = config.client.get_location(args[0])
    except PokeAPIError as exc:
        raise CommandError("Could not get location information") from exc
    for encounter in location.pokemon_encounters:
        print(encounter.name)


def command_inspect(config: Config, *args: str) -> None:
    """Show the details of a caught Pokemon."""
    if len(args) != 1:
        print("Usage: inspect <pokemon>")
        return
    pokemon = config.pokedex.get(args[0])
    if pokemon is None:
        print("you have not caught that pokemon")
    else:
        print(pokemon)


def _show_locations(config: Config, url: str) -> None:
    try:
        page = config.client.get_locations(url)
    except PokeAPIError as exc:
        raise CommandError("Could not get locations information") from exc
    for location in page.results:
        print(location.name)
    config.next_locations_url = page.next
    config.prev_locations_url = page.previous


def command_map(config: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_locations(config, config.next_locations_url)


def command_mapb(config: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if not config.prev_locations_url:
        print("you're on the first page")
        return
    _show_locations(config, config.prev_locations_url)


def command_pokedex(config: Config, *args: str) -> None:
    """List the names of all caught Pokemon."""
    for name in config.pokedex:
        print(f"- {name}")


def command_exit(config: Config, *args: str) -> None:
    """Say goodbye and leave the program with status 0."""
    print("Closing the Pokedex... Goodbye!")
    sys.exit(0)


def get_commands() -> dict[str, Command]:
    """Return the commands keyed by the word that invokes them."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "catch": Command("catch <pokemon>", "Attempt to catch a Pokemon", command_catch),
        "explore": Command("explore <area>", "Shows pokemon in the area", command_explore),
        "inspect": Command(
            "inspect <pokemon>", "Shows stats for a pokemon (if caught!)", command_inspect
        ),
        "map": Command("map", "List next 20 locations", command_map),
        "mapb": Command("mapb", "List previous 20 locations", command_mapb),
        "pokedex": Command("pokedex", "List names of all pokemon caught!", command_pokedex),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }