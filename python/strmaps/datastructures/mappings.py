###########################################################################
###########################################################################
## Module containing mapping and dictionary structures.                  ##
##                                                                       ##
## Copyright (C) 2022 Oliver Michael Kamperis                            ##
##                                                                       ##
## This program is free software: you can redistribute it and/or modify  ##
## it under the terms of the GNU General Public License as published by  ##
## the Free Software Foundation, either version 3 of the License, or     ##
## any later version.                                                    ##
##                                                                       ##
## This program is distributed in the hope that it will be useful,       ##
## but WITHOUT ANY WARRANTY; without even the implied warranty of        ##
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the          ##
## GNU General Public License for more details.                          ##
##                                                                       ##
## You should have received a copy of the GNU General Public License     ##
## along with this program. If not, see <https://www.gnu.org/licenses/>. ##
###########################################################################
###########################################################################

"""Module containing mapping and dictionary structures."""

import collections.abc
import logging
import types
from typing import Iterable, Iterator, final

from strmaps.auxiliary.moreitertools import count_unique, find_all
from strmaps.auxiliary.stringutils import as_string, reverse_string

__copyright__ = "Copyright (C) 2022 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "ReversedStringMap",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


@final
class ReversedStringMap(collections.abc.Mapping):
    """
    Class defining a mapping of strings to strings, where every key is the
    character reversal of the value it maps to.

    The map is read-only through the standard mapping interface, entries are
    only added, removed, or re-keyed through the methods of the class. As long
    as only these methods are used, the reversal invariant
    `key == reverse_string(value)` holds for every entry, with the exception
    of `uppercase_all_keys()` which deliberately re-keys entries.

    Example Usage
    -------------
    ```
    >>> from strmaps.datastructures.mappings import ReversedStringMap
    >>> rev_map = ReversedStringMap()
    >>> rev_map.add_string("abc")
    >>> rev_map.add_string("a")
    >>> rev_map
    ReversedStringMap({'cba': 'abc', 'a': 'a'})

    # Values sort ascending, keys sort descending.
    >>> rev_map.values_sorted()
    ['a', 'abc']
    >>> rev_map.keys_sorted_descending()
    ['cba', 'a']

    # Remove entries by value, all matching entries are removed.
    >>> rev_map.remove_by_value("abc")
    >>> rev_map
    ReversedStringMap({'a': 'a'})
    ```
    """

    __MAP_LOGGER = logging.getLogger("ReversedStringMap")

    __slots__ = {
        "__dict": "The mapping from reversed strings to strings.",
        "__strict": "Whether bulk resets reject non-string items.",
        "__debug": "Whether to log debug messages."
    }

    def __init__(
        self,
        strings: Iterable[object] | None = None, /, *,
        strict: bool = True,
        debug: bool = False
    ) -> None:
        """
        Create a new reversed string map.

        Parameters
        ----------
        `strings: Iterable[object] | None = None` - An iterable of strings to
        initialise the map with, as if passed to `reset_from()`. If not given
        or None, the map is created empty.

        `strict: bool = True` - Whether `reset_from()` rejects items that are
        not strings. If False, such items are converted with `str()`.

        `debug: bool = False` - Whether to log debug messages.

        Raises
        ------
        `NonStringItemError` - If `strict` is True and any of the given
        strings is not a string.
        """
        self.__dict: dict[str, str] = {}
        self.__strict: bool = strict
        self.__debug: bool = debug
        if self.__debug:
            self.__MAP_LOGGER.debug(
                "Creating new reversed string map with: strict=%s, debug=%s",
                strict, debug
            )
        if strings is not None:
            self.reset_from(strings)

    def __copy__(self) -> "ReversedStringMap":
        """Get a shallow copy of the reversed string map."""
        copy_ = self.__class__(strict=self.__strict, debug=self.__debug)
        copy_.__dict.update(self.__dict)
        return copy_

    def __repr__(self) -> str:
        """Get a string representation of the reversed string map."""
        return f"{self.__class__.__name__}({self.__dict})"

    def __getitem__(self, key: str, /) -> str:
        """Get the string that the given reversed string maps to."""
        return self.__dict[key]

    def __iter__(self) -> Iterator[str]:
        """Iterate over the keys (the reversed strings) of the map."""
        yield from self.__dict

    def __len__(self) -> int:
        """Get the number of entries in the map."""
        return len(self.__dict)

    def __contains__(self, key: object, /) -> bool:
        """Check whether the given key is in the map."""
        return key in self.__dict

    @property
    def strict(self) -> bool:
        """Get whether bulk resets reject non-string items."""
        return self.__strict

    @property
    def standard_mapping(self) -> types.MappingProxyType[str, str]:
        """Get a read-only view of the underlying dictionary."""
        return types.MappingProxyType(self.__dict)

    def values_sorted(self) -> list[str]:
        """
        Get a list of all the values of the map in ascending lexicographic
        order. Duplicate values are all included.
        """
        return sorted(self.__dict.values())

    def keys_sorted_descending(self) -> list[str]:
        """
        Get a list of all the keys of the map in descending lexicographic
        order.
        """
        return sorted(self.__dict, reverse=True)

    def first_value(self) -> str | None:
        """
        Get the lexicographically smallest value of the map, or None if the
        map is empty.

        Note that this is taken from the values, not the keys.
        """
        if not self.__dict:
            return None
        return self.values_sorted()[0]

    def last_key(self) -> str | None:
        """
        Get the lexicographically largest key of the map, or None if the map
        is empty.
        """
        if not self.__dict:
            return None
        return self.keys_sorted_descending()[0]

    def keys_uppercased(self) -> list[str]:
        """
        Get a list of all the keys of the map converted to upper case.

        The order of the list is not significant. Keys that collide once
        converted are all kept.
        """
        return [key.upper() for key in self.__dict]

    def distinct_value_count(self) -> int:
        """Get the number of distinct values in the map."""
        return count_unique(self.__dict.values())

    def add_string(self, string: str, /) -> None:
        """
        Add a string to the map, keyed by its reversal.

        If the reversed string is already a key of the map, the value it maps
        to is replaced, so the size of the map may or may not grow.
        """
        key = reverse_string(string)
        if self.__debug:
            self.__MAP_LOGGER.debug(
                "Adding string: key=%r, value=%r, replaces=%s",
                key, string, key in self.__dict
            )
        self.__dict[key] = string

    def remove_by_key(self, key: str, /) -> None:
        """Remove the entry with the given key, if there is one."""
        removed = self.__dict.pop(key, None)
        if self.__debug:
            self.__MAP_LOGGER.debug(
                "Removing by key: key=%r, removed=%s",
                key, removed is not None
            )

    def remove_by_value(self, value: str, /) -> None:
        """Remove every entry that maps to the given value."""
        matches = find_all(
            list(self.__dict.items()),
            lambda _, item: item[1] == value
        )
        removed: int = 0
        for _, (key, _) in matches:
            del self.__dict[key]
            removed += 1
        if self.__debug:
            self.__MAP_LOGGER.debug(
                "Removing by value: value=%r, removed=%s",
                value, removed
            )

    def reset_from(self, items: Iterable[object], /) -> None:
        """
        Clear the map and re-fill it by adding each of the given items in
        order, as if by `add_string()`.

        All items are converted before the map is cleared, so the map is left
        unchanged if any item is rejected.

        Raises
        ------
        `NonStringItemError` - If the map is strict and any item is not a
        string.
        """
        strings: list[str] = [
            as_string(item, self.__strict, index)
            for index, item in enumerate(items)
        ]
        if self.__debug:
            self.__MAP_LOGGER.debug(
                "Resetting map: old_size=%s, items=%s",
                len(self.__dict), len(strings)
            )
        self.__dict.clear()
        for string in strings:
            self.add_string(string)

    def uppercase_all_keys(self) -> None:
        """
        Replace every key of the map with its upper case form, keeping the
        values they map to.

        Entries are processed in insertion order. If two keys collide once
        converted, the entry processed last is kept.
        """
        uppercased: dict[str, str] = {}
        for key, value in self.__dict.items():
            uppercased[key.upper()] = value
        if self.__debug:
            self.__MAP_LOGGER.debug(
                "Uppercasing keys: old_size=%s, new_size=%s",
                len(self.__dict), len(uppercased)
            )
        self.__dict.clear()
        self.__dict.update(uppercased)

    def contains_all_values(self, candidates: Iterable[str], /) -> bool:
        """
        Check whether every one of the given strings is a value of the map.

        Vacuously True if no candidates are given.
        """
        values: set[str] = set(self.__dict.values())
        return all(candidate in values for candidate in list(candidates))


def __main() -> None:
    """Execute the main routine."""
    logging.basicConfig(level=logging.DEBUG)
    rev_map = ReversedStringMap(debug=True)
    rev_map.add_string("abc")
    rev_map.add_string("a")
    print(rev_map)
    print(rev_map.values_sorted())
    print(rev_map.keys_sorted_descending())
    print(rev_map.first_value(), rev_map.last_key())
    print(rev_map.distinct_value_count())
    print(rev_map.contains_all_values(["a"]))
    print(rev_map.contains_all_values(["a", "z"]))
    rev_map.uppercase_all_keys()
    print(rev_map.keys_uppercased())
    print(rev_map)
    rev_map.remove_by_value("abc")
    print(rev_map)
    rev_map.reset_from(["hello", "world"])
    print(rev_map)


if __name__ == "__main__":
    __main()
