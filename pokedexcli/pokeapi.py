"""Client for the PokeAPI with a time-limited response cache."""

from __future__ import annotations

import json
import threading
import time
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable

BASE_URL = "https://pokeapi.co/api/v2"


class PokeAPIError(Exception):
    """Raised when data cannot be fetched from the API or decoded."""


def _field(data: Any, key: str, kind: type) -> Any:
    """Return ``data[key]`` checked against ``kind``; missing or null gives ``kind()``."""
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object holding {key!r}")
    value = data.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"{key}: expected {kind.__name__}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the API URL describing it."""

    name: str = ""
    url: str = ""

    @classmethod
    def _parse(cls, data: Any) -> NamedResource:
        return cls(_field(data, "name", str), _field(data, "url", str))


@dataclass(frozen=True)
class LocationsList:
    """One page of location areas."""

    count: int = 0
    next: str = ""
    previous: str = ""
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationsList:
        """Build a page from decoded JSON; raise ValueError on malformed data."""
        return cls(
            count=_field(data, "count", int),
            next=_field(data, "next", str),
            previous=_field(data, "previous", str),
            results=tuple(
                NamedResource._parse(item) for item in _field(data, "results", list)
            ),
        )


@dataclass(frozen=True)
class Location:
    """A location area and the Pokemon that may be encountered there."""

    pokemon_encounters: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        """Build a location from decoded JSON; raise ValueError on malformed data."""
        return cls(
            tuple(
                NamedResource._parse(_field(item, "pokemon", dict))
                for item in _field(data, "pokemon_encounters", list)
            )
        )


@dataclass(frozen=True)
class Pokemon:
    """A Pokemon's basic details."""

    name: str = ""
    height: int = 0
    weight: int = 0
    base_experience: int = 0
    stats: tuple[tuple[str, int], ...] = ()
    types: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        """Build a Pokemon from decoded JSON; raise ValueError on malformed data."""
        return cls(
            name=_field(data, "name", str),
            height=_field(data, "height", int),
            weight=_field(data, "weight", int),
            base_experience=_field(data, "base_experience", int),
            stats=tuple(
                (_field(_field(item, "stat", dict), "name", str), _field(item, "base_stat", int))
                for item in _field(data, "stats", list)
            ),
            types=tuple(
                _field(_field(item, "type", dict), "name", str)
                for item in _field(data, "types", list)
            ),
        )

    def __str__(self) -> str:
        stats = "".join(f"\n- {name}: {value}" for name, value in self.stats)
        types = "".join(f"\n- {name}" for name in self.types)
        return (
            f"Name: {self.name}\nHeight: {self.height}\nWeight: {self.weight}\n"
            f"Stats:{stats}\nTypes:{types}"
        )


class CacheClient:
    """HTTP client whose responses are cached and expire after an interval.

    A background thread removes stale entries every ``interval`` seconds.
    """

    def __init__(self, timeout: float, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.timeout = timeout
        self.interval = interval
        self._cache: dict[str, tuple[float, bytes]] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(target=self._reap_loop, daemon=True)
        self._reaper.start()

    def __enter__(self) -> CacheClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, url: str) -> bytes:
        """Return the body at ``url``, from the cache when possible."""
        with self._lock:
            entry = self._cache.get(url)
        if entry is not None:
            return entry[1]
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as response:
                if response.status != 200:
                    raise PokeAPIError(
                        f"Get returned non-OK status: {response.status} {response.reason}"
                    )
                data = response.read()
        except urllib.error.HTTPError as exc:
            raise PokeAPIError(f"Get returned non-OK status: {exc.code} {exc.reason}") from exc
        except (OSError, ValueError) as exc:
            raise PokeAPIError(f"Could not GET from {url} error: {exc}") from exc
        with self._lock:
            self._cache[url] = (time.monotonic(), data)
        return data

    def reap(self, now: float) -> None:
        """Drop entries older than the interval, measured at monotonic time ``now``."""
        with self._lock:
            self._cache = {
                key: entry
                for key, entry in self._cache.items()
                if now - entry[0] <= self.interval
            }

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self.reap(time.monotonic())

    def _decode(self, url: str, kind: str, factory: Callable[[Any], Any]) -> Any:
        try:
            data = self.get(url)
        except PokeAPIError as exc:
            raise PokeAPIError(f"Could not get {kind} data: {exc}") from exc
        try:
            return factory(json.loads(data))
        except ValueError as exc:
            raise PokeAPIError(f"Could not process {kind} data: {exc}") from exc

    def get_location(self, location_name: str) -> Location:
        """Fetch one location area by name."""
        return self._decode(
            f"{BASE_URL}/location-area/{location_name}", "location", Location.from_dict
        )

    def get_locations(self, url: str) -> LocationsList:
        """Fetch a page of location areas; an empty URL means the first page."""
        return self._decode(
            url or f"{BASE_URL}/location-area", "locations", LocationsList.from_dict
        )

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Fetch one Pokemon by name."""
        return self._decode(f"{BASE_URL}/pokemon/{pokemon_name}", "pokemon", Pokemon.from_dict)