# Copyright (C) 2023 Oliver Michael Kamperis
# Email: o.m.kamperis@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Module defining utilities for manipulating strings."""

from strmaps.datastructures.errors import NonStringItemError

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "reverse_string",
    "as_string"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


def reverse_string(string: str, /) -> str:
    """
    Reverse the characters of a string.

    Reversal is by code point, so `reverse_string(reverse_string(s)) == s`
    for every string, including the empty string.

    For example:
    ```
    >>> reverse_string("abc")
    'cba'
    ```
    """
    return string[::-1]


def as_string(
    item: object,
    strict: bool = True,
    index: int | None = None
) -> str:
    """
    Get the string form of an item.

    Parameters
    ----------
    `item: object` - The item to convert.

    `strict: bool = True` - If True, the item must already be a string.
    Otherwise, the item is converted with `str()`.

    `index: int | None = None` - The position of the item in the sequence
    it was taken from, used only in error messages.

    Raises
    ------
    `NonStringItemError` - If `strict` is True and the item is not a string.
    """
    if isinstance(item, str):
        return item
    if strict:
        raise NonStringItemError(item, index)
    return str(item)
