# pokedexcli

An interactive command-line Pokedex. Page through the location areas of the
Pokemon world, explore an area to see which Pokemon can be met there, try to
catch them, and inspect the ones you have caught. Data comes from the public
PokeAPI, and responses are cached in memory for a short time.

## Installation

```
pip install .
```

## Usage

Start the interactive prompt:

```
pokedexcli
```

You will see the prompt `Pokedex > `. Each line is split on spaces and
lower-cased before it is handled; the first word picks the command and the rest
are its arguments. An unknown first word prints `Unknown command`.

| Command             | What it does                                  |
|---------------------|-----------------------------------------------|
| `help`              | Displays a help message                       |
| `map`               | List next 20 locations                        |
| `mapb`              | List previous 20 locations                    |
| `explore <area>`    | Shows pokemon in the area                     |
| `catch <pokemon>`   | Attempt to catch a Pokemon                    |
| `inspect <pokemon>` | Shows stats for a pokemon (if caught!)        |
| `pokedex`           | List names of all pokemon caught!             |
| `exit`              | Exit the Pokedex                              |

Notes on the commands:

- `map` shows the next page of location areas each time it is run, starting
  from the first page. `mapb` goes back a page, and prints
  `you're on the first page` when there is no previous page.
- `explore` takes exactly one area name.
- `catch` accepts several names at once and throws a Pokeball at each in turn.
  The chance of a catch falls as a Pokemon's base experience rises; a caught
  Pokemon is added to your Pokedex.
- `inspect` prints a caught Pokemon's name, height, weight, stats and types,
  or `you have not caught that pokemon`.
- `pokedex` lists caught Pokemon in the order they were caught.

A session looks like this:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
tentacool
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
Type 'inspect tentacool' to see its details
Pokedex > inspect tentacool
Name: tentacool
Height: ...
Weight: ...
Stats:
- hp: ...
Types:
- water
- poison
```

The prompt ends on `exit` or at end of input, with status 0. If a command
fails (the API cannot be reached, an area or Pokemon is not found, or
`explore` is given the wrong number of names) the error is printed to standard
error with a timestamp and the program exits with status 1.

## Using the library

`pokedexcli.pokeapi.CacheClient` can be used on its own. It also works as a
context manager, which stops its background cache reaper on exit:

```python
from pokedexcli.pokeapi import CacheClient

with CacheClient(timeout=5.0, interval=3.0) as client:
    pokemon = client.get_pokemon("pikachu")
    print(pokemon)
    page = client.get_locations("")  # empty URL: the first page
    for area in page.results:
        print(area.name)
    for encounter in client.get_location(page.results[0].name).pokemon_encounters:
        print(encounter.name)
```

`CacheClient.get(url)` returns the raw response body. Responses are cached by
URL, and a background thread drops entries older than `interval` seconds;
`close()` stops that thread. Failures to fetch or decode data are raised as
`PokeAPIError`. The decoded results are the frozen dataclasses `LocationsList`,
`Location`, `NamedResource` and `Pokemon`.

The commands live in `pokedexcli.commands` (`get_commands()` returns them keyed
by name, and a `Config` holds the shared state), and `pokedexcli.cli.run_repl`
runs them over any iterable of lines.

## Limitations

The Pokedex is kept in memory only: caught Pokemon are not saved and are gone
when the program ends.

## Running the tests

```
pip install ".[test]"
pytest
```