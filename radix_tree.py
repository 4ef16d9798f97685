"""
Compressed trie (radix tree) over page identifiers.

Used by the wiki generator for command-line search and mirrored by the
JavaScript trie in the generated bundle, which rebuilds the same structure in
the browser from the page list.

Features:
- Edge labels hold whole substrings; siblings never share a first character
- Substring search over every stored identifier
- Results come back in reverse discovery order (last visited, first returned)
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional


def longest_common_prefix(a: str, b: str) -> str:
    """Return the longest string that is a prefix of both a and b."""
    i = 0
    n = min(len(a), len(b))
    while i < n and a[i] == b[i]:
        i += 1
    return a[:i]


# -- data structures --
class RadixNode:
    """A node in the tree; edge_label is the text its incoming edge adds."""

    __slots__ = ("edge_label", "children", "is_word")

    def __init__(self, edge_label: str, is_word: bool = False):
        self.edge_label = edge_label
        self.children: Dict[str, RadixNode] = {}
        self.is_word = is_word

    def insert(self, word: str) -> None:
        """Insert word below this node, splitting an edge where paths diverge."""
        if not word:
            self.is_word = True
            return

        child = self.children.get(word[0])
        if child is None:
            self.children[word[0]] = RadixNode(word, is_word=True)
            return

        common = longest_common_prefix(child.edge_label, word)
        if common == child.edge_label:
            if common == word:
                child.is_word = True
            else:
                child.insert(word[len(common):])
            return

        # split: common prefix becomes the parent of the old child
        remainder = child.edge_label[len(common):]
        rest = word[len(common):]
        middle = RadixNode(common, is_word=(rest == ""))
        child.edge_label = remainder
        middle.children[remainder[0]] = child
        if rest:
            middle.children[rest[0]] = RadixNode(rest, is_word=True)
        self.children[word[0]] = middle

    def collect(self, query: str, path: str, found: List[str]) -> None:
        """Append to found every word at or below this node containing query."""
        path += self.edge_label
        if self.is_word and query in path:
            found.append(path)
        for child in self.children.values():
            child.collect(query, path, found)

    def format_lines(self, depth: int, lines: List[str]) -> None:
        if self.edge_label:
            marker = " (leaf)" if self.is_word else ""
            lines.append(f"{'-' * depth} {self.edge_label}{marker}")
        for child in self.children.values():
            child.format_lines(depth + 1, lines)


class RadixTree:
    """Set of identifiers with shared-prefix compression.

    The tree is built once from the page list and then only queried.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self.root = RadixNode("")
        if words is not None:
            for word in words:
                self.insert(word)

    def insert(self, word: str) -> None:
        self.root.insert(word)

    def search(self, query: str) -> List[str]:
        """Return every stored identifier that contains query.

        Order is the reverse of the depth-first discovery order. An empty
        query matches everything; callers that want "no results" for empty
        input must check before calling.
        """
        found: List[str] = []
        self.root.collect(query, "", found)
        found.reverse()
        return found

    def __contains__(self, word: str) -> bool:
        node = self.root
        while word:
            child = node.children.get(word[0])
            if child is None or not word.startswith(child.edge_label):
                return False
            word = word[len(child.edge_label):]
            node = child
        return node.is_word

    def format_tree(self, indent: int = 0) -> str:
        """Debug dump: one line per edge, dashes show depth."""
        lines: List[str] = []
        self.root.format_lines(indent, lines)
        return "\n".join(lines)

    def print(self, indent: int = 0) -> None:
        print(self.format_tree(indent))
