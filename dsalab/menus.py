"""Interactive menus for exercising the data structures from a terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TextIO

from dsalab.bst import BinarySearchTree
from dsalab.circular_linked_list import CircularLinkedList
from dsalab.doubly_linked_list import DoublyLinkedList
from dsalab.queues import CircularQueue, LinearQueue, QueueOverflow, QueueUnderflow
from dsalab.singly_linked_list import SinglyLinkedList
from dsalab.stack import Stack, StackOverflow, StackUnderflow


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def say(self, text: str = "") -> None:
        print(text, file=self._out)

    def ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.strip()

    def ask_number(self, prompt: str, kind: Callable[[str], Any] = int) -> Any:
        while True:
            text = self.ask(prompt)
            try:
                return kind(text)
            except ValueError:
                self.say("Please enter a number.")


_Handler = Callable[[_Console], None]


@dataclass
class _Menu:
    options: list[tuple[str, _Handler]]
    farewell: str
    ask_continue: bool = False


def _joined(values: Iterable[Any]) -> str:
    return " ".join(str(v) for v in values)


def _stack_menu() -> _Menu:
    stack = Stack()

    def create(con: _Console) -> None:
        nonlocal stack
        stack = Stack()
        con.say("Stack created!")

    def empty(con: _Console) -> None:
        con.say("Yes, stack is empty!" if stack.is_empty() else "No, the stack is not empty!")

    def full(con: _Console) -> None:
        con.say("Yes, stack is full!" if stack.is_full() else "No, the stack is not full!")

    def push(con: _Console) -> None:
        value = con.ask_number("Enter a value: ")
        try:
            stack.push(value)
        except StackOverflow:
            con.say("Stack OVERFLOW !!")
        else:
            con.say(f"Value entered: {value}")

    def pop(con: _Console) -> None:
        try:
            value = stack.pop()
        except StackUnderflow:
            con.say("Stack UNDERFLOW !!")
        else:
            con.say(f"Value removed: {value}")

    def peek(con: _Console) -> None:
        con.say(f"Stack pointer is at {stack.peek()} index.")

    def show(con: _Console) -> None:
        if stack.is_empty():
            con.say("Stack is EMPTY!")
        else:
            con.say("Array...")
            con.say(_joined(stack))

    return _Menu(
        [
            ("Create stack", create),
            ("Check if stack is empty", empty),
            ("Check if stack is full", full),
            ("Insert a value", push),
            ("Delete last value", pop),
            ("Peek into a stack", peek),
            ("Show stack", show),
        ],
        "Thank You! :)",
        ask_continue=True,
    )


def _queue_menu(factory: Callable[[], LinearQueue | CircularQueue]) -> Callable[[], _Menu]:
    def build() -> _Menu:
        queue = factory()

        def show(con: _Console) -> None:
            con.say("Queue: EMPTY !!" if queue.is_empty() else f"Queue: {_joined(queue)}")

        def enqueue(con: _Console) -> None:
            value = con.ask_number("Enter data: ")
            try:
                queue.enqueue(value)
            except QueueOverflow:
                con.say("Queue Overflow !!")

        def dequeue(con: _Console) -> None:
            try:
                value = queue.dequeue()
            except QueueUnderflow:
                con.say("Queue Underflow !!")
            else:
                con.say(f"Removed : {value}")

        return _Menu(
            [("Show queue", show), ("Enqueue", enqueue), ("Dequeue", dequeue)],
            "Thank You! :)",
        )

    return build


def _singly_menu() -> _Menu:
    items = SinglyLinkedList()
    empty_message = "Can't delete because list is already EMPTY!"

    def show(con: _Console) -> None:
        con.say(f"List: {_joined(items)}" if len(items) else "List is EMPTY!")

    def append(con: _Console) -> None:
        items.append(con.ask_number("Enter a value you want to insert at last: "))

    def prepend(con: _Console) -> None:
        items.prepend(con.ask_number("Enter a value you want to insert at front: "))

    def insert_before(con: _Console) -> None:
        value = con.ask_number("Enter a value you want to insert: ")
        key = con.ask_number("Enter the value before which you want to insert this value: ")
        if items.insert_before(value, key):
            con.say("Value has been added successfully.")
        else:
            con.say("FAILED!!!")

    def pop_front(con: _Console) -> None:
        if not len(items):
            con.say(empty_message)
        else:
            con.say(f"Deleted value: {items.pop_front()}")

    def pop_back(con: _Console) -> None:
        if not len(items):
            con.say(empty_message)
        else:
            con.say(f"Deleted value: {items.pop_back()}")

    def remove(con: _Console) -> None:
        if not len(items):
            con.say(empty_message)
            return
        key = con.ask_number("Enter the value which you want to delete: ")
        if items.remove(key):
            con.say("Value has been deleted successfully.")
        else:
            con.say("Value not found!")

    return _Menu(
        [
            ("Show List", show),
            ("Insert a value at last position", append),
            ("Insert a value at first position", prepend),
            ("Insert before a specific value", insert_before),
            ("Delete first value", pop_front),
            ("Delete last value", pop_back),
            ("Delete any specific value in between the list", remove),
        ],
        "Thank You! :)",
        ask_continue=True,
    )


def _two_way_menu(
    factory: Callable[[], DoublyLinkedList | CircularLinkedList],
) -> Callable[[], _Menu]:
    def build() -> _Menu:
        items = factory()
        empty_message = "List already EMPTY !!"

        def show(con: _Console) -> None:
            con.say(f"List: {_joined(items)}" if len(items) else "List: EMPTY!!")

        def push_front(con: _Console) -> None:
            items.push_front(con.ask_number("Enter data: "))

        def insert_after(con: _Console) -> None:
            value = con.ask_number("Enter data: ")
            key = con.ask_number("Enter key: ")
            if items.insert_after(value, key):
                con.say("Data entered successfully!")
            else:
                con.say("Can't find the key value!")

        def push_back(con: _Console) -> None:
            items.push_back(con.ask_number("Enter data: "))

        def pop_front(con: _Console) -> None:
            if not len(items):
                con.say(empty_message)
            else:
                con.say(f"Deleted value: {items.pop_front()}")

        def remove(con: _Console) -> None:
            if not len(items):
                con.say(empty_message)
                return
            key = con.ask_number("Enter key: ")
            if items.remove(key):
                con.say("Data deleted successfully!")
            else:
                con.say("Can't find the key value!")

        def pop_back(con: _Console) -> None:
            if not len(items):
                con.say(empty_message)
            else:
                con.say(f"Deleted value: {items.pop_back()}")

        return _Menu(
            [
                ("Show list", show),
                ("Insert value at front", push_front),
                ("Insert value after the key value", insert_after),
                ("Insert value at last", push_back),
                ("Delete front value", pop_front),
                ("Delete a mid value", remove),
                ("Delete last value", pop_back),
            ],
            "THANK YOU",
        )

    return build


def _bst_menu() -> _Menu:
    tree = BinarySearchTree([100.0])

    def printer(traversal: Callable[[], Iterable[float]]) -> _Handler:
        def show(con: _Console) -> None:
            con.say(" -> ".join([f"{v:.2f}" for v in traversal()] + ["NULL"]))

        return show

    def insert(con: _Console) -> None:
        tree.insert(con.ask_number("Enter the data you want to insert: ", float))

    return _Menu(
        [
            ("PreOrder Traversal", printer(tree.preorder)),
            ("InOrder Traversal", printer(tree.inorder)),
            ("PostOrder Traversal", printer(tree.postorder)),
            ("Insert a new data", insert),
        ],
        "Thank You",
    )


_MENUS: dict[str, Callable[[], _Menu]] = {
    "stack": _stack_menu,
    "linear-queue": _queue_menu(LinearQueue),
    "circular-queue": _queue_menu(CircularQueue),
    "singly-linked-list": _singly_menu,
    "doubly-linked-list": _two_way_menu(DoublyLinkedList),
    "circular-linked-list": _two_way_menu(CircularLinkedList),
    "bst": _bst_menu,
}


def _keep_going(con: _Console) -> bool:
    while True:
        answer = con.ask("Do you want to continue? (y/n) -> ")
        if answer == "y":
            return True
        if answer == "n":
            con.say("Thank You! See you later :)")
            return False
        con.say("Sorry! I didn't understand! Enter again...")


def _run(menu: _Menu, con: _Console) -> None:
    exit_number = len(menu.options) + 1
    try:
        while True:
            con.say()
            for number, (label, _) in enumerate(menu.options, start=1):
                con.say(f"{number}. {label}")
            con.say(f"{exit_number}. Exit")
            try:
                choice = int(con.ask("Enter your choice: "))
            except ValueError:
                choice = 0
            if choice == exit_number:
                con.say(menu.farewell)
                return
            if not 1 <= choice < exit_number:
                con.say("Wrong Choice! Try again...")
                continue
            menu.options[choice - 1][1](con)
            if menu.ask_continue and not _keep_going(con):
                return
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Run the menu for the structure named on the command line."""
    parser = argparse.ArgumentParser(
        prog="dsalab-menu", description="Exercise a data structure interactively."
    )
    parser.add_argument("structure", choices=sorted(_MENUS))
    args = parser.parse_args(argv)
    _run(_MENUS[args.structure](), _Console(sys.stdin, sys.stdout))
    return 0