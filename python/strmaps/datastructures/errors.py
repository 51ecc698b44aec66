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

"""Module for all string mapping related errors."""

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "StrMapsError",
    "NonStringItemError"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class StrMapsError(Exception):
    """Base class for all errors raised by string mappings."""
    pass


class NonStringItemError(StrMapsError, TypeError):
    """
    Raised when an item that must be a string is of some other type.

    Sub-classes `TypeError`, so it can be caught as a built-in type error.
    """

    def __init__(self, item: object, index: int | None = None) -> None:
        """
        Create a new non-string item error.

        Parameters
        ----------
        `item: object` - The offending item.

        `index: int | None = None` - The position of the item in the
        sequence it was taken from, if any.
        """
        self.item: object = item
        self.index: int | None = index
        if index is None:
            message = f"Expected a string. Got; {type(item).__name__}."
        else:
            message = (f"Expected a string at index {index}. "
                       f"Got; {type(item).__name__}.")
        super().__init__(message)
