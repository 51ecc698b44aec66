###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Module defining additional functions for operating on iterables."""

__all__ = (
    "find_all",
    "count_unique"
)

from typing import Callable, Hashable, Iterable, Iterator, Optional, TypeVar

_VT = TypeVar("_VT")


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


def find_all(iterable: Iterable[_VT],
             condition: Callable[[int, _VT], bool],
             limit: Optional[int] = None
             ) -> Iterator[tuple[int, _VT]]:
    """
    Return an iterator over all the elements of the iterable where the
    condition holds true.

    If `limit` is given, only the first `limit` elements are checked.
    """
    for index, element in enumerate(iterable):
        if index == limit:
            break
        if condition(index, element):
            yield (index, element)


def count_unique(iterable: Iterable[Hashable]) -> int:
    """Count the number of distinct elements of the iterable."""
    return len(set(iterable))
