"""A compressed (radix) trie whose edges are ranges into a shared word table.

Edges never hold text. Each one is a (word_index, start, end) triple that
points into the word table the trie was built from. All edges leaving a node
begin at the same depth, so an edge's `start` is also its depth in the tree.

A leaf is a node with no children; the path to it spells exactly one word. A
word that is a proper prefix of another word ends in an empty "marker" leaf
whose range has end == start - 1. Inserting the same word twice records the
later index as an alias of the existing leaf.
"""

from typing import Iterator, Sequence

from tqdm import tqdm

from radix.arena import ROOT, NodeArena, Range
from radix.word_table import WordTable, load_words


class CompressedTrie:
    words: Sequence[str]
    arena: NodeArena

    def __init__(self, words: Sequence[str]):
        self.words = words
        self.arena = NodeArena()

    def check_range(self, rng: Range):
        assert 0 <= rng.word_index < len(self.words), f"bad word index: {rng}"
        word = self.words[rng.word_index]
        assert 0 <= rng.start <= len(word), f"bad start: {rng}"
        assert rng.start - 1 <= rng.end < len(word), f"bad end: {rng}"

    def edge_text(self, node: int) -> str:
        rng = self.arena[node].range
        if rng is None:
            return ""
        self.check_range(rng)
        return self.words[rng.word_index][rng.start : rng.end + 1]

    def spelled(self, node: int) -> str:
        """The text spelled by the path from the root to this node."""
        rng = self.arena[node].range
        if rng is None:
            return ""
        self.check_range(rng)
        return self.words[rng.word_index][: rng.end + 1]

    def word(self, leaf: int) -> str:
        assert self.arena[leaf].is_leaf(), f"{leaf} is not a leaf"
        return self.spelled(leaf)

    # ---

    def _match_length(self, word: str, offset: int, rng: Range) -> int:
        assert rng.start == offset, f"edge {rng} does not start at depth {offset}"
        self.check_range(rng)
        edge_word = self.words[rng.word_index]
        n = min(len(word), rng.end + 1)
        i = offset
        while i < n and word[i] == edge_word[i]:
            i += 1
        return i - offset

    def add_word(self, i: int) -> int:
        """Insert words[i], which must come after all words already inserted.

        Returns the leaf that spells the word.
        """
        arena = self.arena
        word = self.words[i]
        parent = ROOT
        offset = 0
        while True:
            for child in arena.children(parent):
                node = arena[child]
                rng = node.range
                if offset == len(word) and len(rng) == 0:
                    # This exact word already ends here.
                    node.aliases.append(i)
                    return child
                m = self._match_length(word, offset, rng)
                if m == 0:
                    continue
                if m < len(rng):
                    return self._split(child, m, i)
                break
            else:
                # Nothing shares a first letter; hang the rest of the word here.
                # When the word is used up, this is an empty marker leaf.
                leaf = arena.new_node(Range(i, offset, len(word) - 1))
                arena.append_child(parent, leaf)
                return leaf

            offset = rng.end + 1
            if node.is_leaf():
                if offset == len(word):
                    node.aliases.append(i)
                    return child
                # The old word ends here but the new one keeps going.
                marker = arena.new_node(Range(rng.word_index, offset, offset - 1))
                leaf = arena.new_node(Range(i, offset, len(word) - 1))
                arena.append_child(child, marker)
                arena.append_child(child, leaf)
                arena[marker].aliases, node.aliases = node.aliases, []
                return leaf
            parent = child

    def _split(self, idx: int, m: int, i: int) -> int:
        """Shorten idx's edge to m letters and branch between its tail and words[i]."""
        arena = self.arena
        node = arena[idx]
        rng = node.range
        word = self.words[i]
        split_at = rng.start + m
        tail = arena.new_node(
            Range(rng.word_index, split_at, rng.end), first_child=node.first_child
        )
        leaf = arena.new_node(Range(i, split_at, len(word) - 1))
        arena[tail].sibling = leaf
        arena[tail].aliases, node.aliases = node.aliases, []
        node.first_child = tail
        rng.end = split_at - 1
        return leaf

    # ---

    def completions(self, prefix: str) -> set[int] | None:
        """All leaves whose words start with prefix, or None if there are none.

        The empty prefix matches every word.
        """
        if prefix is None:
            raise ValueError("prefix must be a string, not None")
        arena = self.arena
        out = set[int]()
        stack = [ROOT]
        while stack:
            parent = stack.pop()
            for child in arena.children(parent):
                rng = arena[child].range
                depth = rng.start
                remaining = len(prefix) - depth
                n = min(remaining, len(rng))
                edge_word = self.words[rng.word_index]
                if prefix[depth : depth + n] != edge_word[depth : depth + n]:
                    continue
                if len(rng) >= remaining:
                    out.update(self.leaves(child))
                else:
                    stack.append(child)
        return out or None

    def completion_words(self, prefix: str) -> list[str]:
        leaves = self.completions(prefix)
        if leaves is None:
            return []
        return sorted(self.word(leaf) for leaf in leaves)

    def find_word(self, word: str) -> int | None:
        """The leaf that spells exactly this word, or None."""
        arena = self.arena
        parent = ROOT
        offset = 0
        while True:
            for child in arena.children(parent):
                rng = arena[child].range
                if len(rng) == 0:
                    if offset == len(word):
                        return child
                    continue
                if self._match_length(word, offset, rng) == len(rng):
                    break
            else:
                return None
            offset = rng.end + 1
            if arena[child].is_leaf():
                return child if offset == len(word) else None
            parent = child

    def leaves(self, node: int = ROOT) -> Iterator[int]:
        """Leaves in the subtree under node, including node itself."""
        stack = [node]
        while stack:
            idx = stack.pop()
            n = self.arena[idx]
            if n.is_leaf():
                if n.range is not None:
                    yield idx
                continue
            stack.extend(self.arena.children(idx))

    def walk(self) -> Iterator[tuple[int, int]]:
        """Pre-order (node, depth) pairs, children in sibling order."""
        stack = [(ROOT, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            children = [*self.arena.children(node)]
            stack.extend((child, depth + 1) for child in reversed(children))

    def size(self):
        """Number of distinct words."""
        return sum(1 for _ in self.leaves())

    def num_nodes(self):
        return self.arena.num_nodes()

    def check_invariants(self):
        """Check the structural invariants of the trie:

        - Every edge range is well-formed and starts at its parent's depth.
        - Every edge agrees with the path above it.
        - Sibling edges do not share a first letter; at most one is empty.
        - Branches have at least two children; only leaves carry aliases.
        - Each word index is spelled by exactly one leaf.
        """
        arena = self.arena
        assert arena[ROOT].range is None
        seen = dict[int, int]()
        stack = [ROOT]
        while stack:
            parent = stack.pop()
            parent_rng = arena[parent].range
            depth = 0 if parent_rng is None else parent_rng.end + 1
            path = self.spelled(parent)
            firsts = set[str]()
            has_marker = False
            children = [*arena.children(parent)]
            if parent != ROOT:
                assert len(children) >= 2, f"{path!r} has a single child"
            for child in children:
                node = arena[child]
                rng = node.range
                assert rng is not None
                self.check_range(rng)
                assert rng.start == depth, f"{rng} should start at {depth}"
                assert self.words[rng.word_index][:depth] == path
                text = self.edge_text(child)
                if text:
                    assert text[0] not in firsts, f"siblings share {text[0]!r}"
                    firsts.add(text[0])
                else:
                    assert not has_marker, f"two end markers under {path!r}"
                    assert node.is_leaf()
                    has_marker = True
                if node.is_leaf():
                    for i in [rng.word_index, *node.aliases]:
                        assert i not in seen, f"word {i} has two leaves"
                        assert self.words[i] == self.spelled(child)
                        seen[i] = child
                else:
                    assert not node.aliases
                    stack.append(child)
        assert len(seen) == len(self.words)

    @staticmethod
    def create_from_wordlist(words: Sequence[str]) -> "CompressedTrie":
        return build(WordTable(words))


def build(words: Sequence[str], progress=False) -> CompressedTrie:
    """Insert words one at a time, in order."""
    trie = CompressedTrie(words)
    indices = range(len(words))
    if progress:
        indices = tqdm(indices, smoothing=0)
    for i in indices:
        trie.add_word(i)
    return trie


def completions(
    trie: CompressedTrie, words: Sequence[str], prefix: str
) -> set[int] | None:
    if words is not trie.words:
        if len(words) != len(trie.words) or any(
            a != b for a, b in zip(words, trie.words)
        ):
            raise ValueError(
                "completions must use the word table the trie was built from"
            )
    return trie.completions(prefix)


def make_trie(dict_input: str, progress=False) -> CompressedTrie:
    return build(load_words(dict_input), progress=progress)
