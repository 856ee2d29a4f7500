"""Classic data structures and algorithms: sorts, searches, Tower of Hanoi,
a bounded stack, array queues, linked lists, binary trees, a trie, and
interactive terminal menus."""

__version__ = "0.1.0"