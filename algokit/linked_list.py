"""A singly linked list of integers and an interactive menu to drive it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass
class _Node:
    data: int
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A singly linked list supporting insertion and deletion at any point."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, position: int) -> _Node:
        if position < 0:
            raise IndexError(f"position {position} is out of range")
        node = self._head
        for _ in range(position):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError(f"position {position} is out of range")
        return node

    def insert_front(self, value: int) -> None:
        """Insert ``value`` before the first node."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: int) -> None:
        """Insert ``value`` after the last node."""
        new = _Node(value)
        if self._head is None:
            self._head = new
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = new
        self._size += 1

    def insert_after(self, position: int, value: int) -> None:
        """Insert ``value`` after the node at zero-based ``position``."""
        anchor = self._node_at(position)
        anchor.next = _Node(value, anchor.next)
        self._size += 1

    def delete_front(self) -> int:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("list is empty")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.data

    def delete_last(self) -> int:
        """Remove the last node and return its value."""
        if self._head is None:
            raise IndexError("list is empty")
        if self._head.next is None:
            value = self._head.data
            self._head = None
            self._size = 0
            return value
        previous = self._head
        node = previous.next
        while node.next is not None:
            previous, node = node, node.next
        previous.next = None
        self._size -= 1
        return node.data

    def delete_after(self, position: int) -> int:
        """Remove the node following the one at zero-based ``position``."""
        anchor = self._node_at(position)
        removed = anchor.next
        if removed is None:
            raise IndexError(f"no node after position {position}")
        anchor.next = removed.next
        self._size -= 1
        return removed.data

    def search(self, value: int) -> list[int]:
        """Return the one-based positions at which ``value`` occurs."""
        return [index for index, data in enumerate(self, start=1) if data == value]

    def _reverse(self) -> None:
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def drop_dominated(self) -> None:
        """Remove every node that has a greater value somewhere after it."""
        if self._head is None:
            return
        self._reverse()
        largest = self._head.data
        last = self._head
        node = self._head.next
        while node is not None:
            if node.data < largest:
                last.next = node.next
                self._size -= 1
            else:
                largest = node.data
                last = node
            node = node.next
        self._reverse()


_MENU = (
    "\n\n*********Main Menu*********\n"
    "\nChoose one option from the following list ...\n"
    "\n===============================================\n"
    "\n1.Insert in begining\n2.Insert at last\n3.Insert at any random location\n"
    "4.Delete from Beginning\n5.Delete from last\n6.Delete node after specified location\n"
    "7.Search for an element\n8.Show\n9.Exit\n"
    "\nEnter your choice?"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _EndOfInput(Exception):
    pass


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise _EndOfInput from None
    return int(token)


def _run_choice(items: SinglyLinkedList, choice: int, tokens: Iterator[str]) -> None:
    if choice == 1:
        print("\nEnter value")
        items.insert_front(_read_int(tokens))
        print("\nNode inserted")
    elif choice == 2:
        print("\nEnter value?")
        items.append(_read_int(tokens))
        print("\nNode inserted")
    elif choice == 3:
        print("\nEnter element value")
        value = _read_int(tokens)
        print("\nEnter the location after which you want to insert ")
        location = _read_int(tokens)
        try:
            items.insert_after(location, value)
        except IndexError:
            print("\ncan't insert")
        else:
            print("\nNode inserted")
    elif choice == 4:
        try:
            items.delete_front()
        except IndexError:
            print("\nList is empty")
        else:
            print("\nNode deleted from the begining ...")
    elif choice == 5:
        try:
            items.delete_last()
        except IndexError:
            print("\nlist is empty")
        else:
            print("\nDeleted Node from the last ...")
    elif choice == 6:
        print("\n Enter the location of the node after which you want to perform deletion ")
        location = _read_int(tokens)
        try:
            items.delete_after(location - 1)
        except IndexError:
            print("\nCan't delete")
        else:
            print(f"\nDeleted node {location + 1} ")
    elif choice == 7:
        if not len(items):
            print("\nEmpty List")
            return
        print("\nEnter item which you want to search?")
        positions = items.search(_read_int(tokens))
        for position in positions:
            print(f"item found at location {position} ")
        if not positions:
            print("Item not found")
    elif choice == 8:
        if not len(items):
            print("Nothing to print")
            return
        print("\nprinting values . . . . .")
        for value in items:
            print(f"\n{value}", end="")
        print()
    else:
        print("Please enter valid choice..")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive list menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive singly linked list.")
    parser.parse_args(argv)
    items = SinglyLinkedList()
    tokens = _tokens(sys.stdin)
    while True:
        print(_MENU)
        try:
            choice = _read_int(tokens)
        except _EndOfInput:
            return 0
        except ValueError:
            print("Please enter valid choice..")
            continue
        if choice == 9:
            return 0
        try:
            _run_choice(items, choice, tokens)
        except _EndOfInput:
            return 0
        except ValueError:
            print("\nInvalid number")


if __name__ == "__main__":
    sys.exit(main())