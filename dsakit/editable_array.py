"""An array that supports insertion and deletion by position or value."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO


class EditableArray(Sequence):
    """A sequence of integers edited by index or by value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EditableArray):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"EditableArray({self._items!r})"

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` at ``index``; ``index`` may equal the length."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range for insertion")
        self._items.insert(index, value)

    def remove_at(self, index: int) -> int:
        """Delete and return the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items.pop(index)

    def remove_value(self, value: int) -> int:
        """Delete the first element equal to ``value`` and return its index."""
        try:
            position = self._items.index(value)
        except ValueError:
            raise ValueError(f"value {value} not present") from None
        del self._items[position]
        return position

    def describe(self) -> str:
        """Render one line per element, or a note that the array is empty."""
        if not self._items:
            return "array is empty :"
        return "\n".join(
            f"at Index :{index}={value}" for index, value in enumerate(self._items)
        )


class _Reader:
    def __init__(self, stream: TextIO) -> None:
        self._tokens = (token for line in stream for token in line.split())

    def integer(self) -> int:
        try:
            return int(next(self._tokens))
        except StopIteration:
            raise EOFError from None


_MENU = (
    "\nchoose the options : \n\n"
    "press 1 for insertion \n"
    "press 2 for deletion \n"
    "press 3 to display array elements \n"
    "press 0 to exit "
)
_BAD_INDEX = "Index not found enter valid Index position "


def _run(reader: _Reader) -> None:
    print("Enter size of array : ", end="")
    size = reader.integer()
    print("enter the elements of array : ", end="")
    array = EditableArray(reader.integer() for _ in range(size))
    print()
    print("array elements are :  " + "  ".join(map(str, array)))
    while True:
        print(_MENU)
        option = reader.integer()
        if option == 0:
            break
        if option == 1:
            print("Enter the key value which you want to insert in Array : ", end="")
            key = reader.integer()
            print("Enter the Index position where you want to insert : ", end="")
            index = reader.integer()
            try:
                array.insert(index, key)
            except IndexError:
                print(_BAD_INDEX)
        elif option == 2:
            print("press 1 if you want to delete the element  by location :")
            print("press 2 if you want to delete the element  by key :")
            choice = reader.integer()
            if choice == 1:
                print("enter the Index position which you want to delete :  ", end="")
                index = reader.integer()
                try:
                    array.remove_at(index)
                except IndexError:
                    print(_BAD_INDEX)
                else:
                    print("Element deleted successfully :----- ")
            elif choice == 2:
                print("Enter the key value which you want to delete :  ", end="")
                key = reader.integer()
                try:
                    array.remove_value(key)
                except ValueError:
                    print("key not found :")
                else:
                    print("key Matched :")
                    print("Element deleted successfully :----- ")
            else:
                print("enter valid option ")
        elif option == 3:
            print("display array elements :")
            print(array.describe())
        else:
            print("pls enter valid option :")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive insert/delete/display menu on standard input."""
    parser = argparse.ArgumentParser(
        description="Edit an integer array through a numbered menu read from stdin."
    )
    parser.parse_args(argv)
    try:
        _run(_Reader(sys.stdin))
    except EOFError:
        pass
    print("program end")
    return 0