# Nodes live in a flat list and point at each other by index. This keeps
# splitting an edge down to a handful of integer assignments.

from dataclasses import dataclass, field

ROOT = 0


@dataclass(slots=True)
class Range:
    """Edge label: words[word_index][start:end + 1].

    end == start - 1 is the empty range used by end-of-word markers.
    """

    word_index: int
    start: int
    end: int

    def __len__(self):
        return self.end - self.start + 1

    def __str__(self):
        return f"({self.word_index},{self.start},{self.end})"


@dataclass(slots=True)
class Node:
    range: Range | None
    first_child: int | None = None
    sibling: int | None = None
    aliases: list[int] = field(default_factory=list)
    """Other word indices that spell the same word as this leaf."""

    def is_leaf(self):
        return self.first_child is None


class NodeArena:
    def __init__(self):
        self.nodes = [Node(None)]

    def __getitem__(self, idx: int) -> Node:
        return self.nodes[idx]

    def __len__(self):
        return len(self.nodes)

    def new_node(self, rng: Range, first_child: int | None = None) -> int:
        self.nodes.append(Node(rng, first_child))
        return len(self.nodes) - 1

    def children(self, idx: int):
        child = self.nodes[idx].first_child
        while child is not None:
            yield child
            child = self.nodes[child].sibling

    def last_child(self, idx: int) -> int | None:
        last = None
        for last in self.children(idx):
            pass
        return last

    def append_child(self, parent: int, child: int):
        last = self.last_child(parent)
        if last is None:
            self.nodes[parent].first_child = child
        else:
            self.nodes[last].sibling = child

    def num_nodes(self):
        return len(self.nodes)
