"""Debug output for a CompressedTrie: an indented dump and Graphviz DOT."""

from radix.trie import CompressedTrie


def tree_to_string(trie: CompressedTrie) -> str:
    """One line per node: the text spelled so far, then the edge's range."""
    out = []
    for node, depth in trie.walk():
        rng = trie.arena[node].range
        indent = "    " * depth
        if rng is None:
            out.append(f"{indent}root\n")
        else:
            out.append(f"{indent}{trie.spelled(node)} {rng}\n")
    return "".join(out)


def print_tree(trie: CompressedTrie):
    print(tree_to_string(trie), end="")


def to_dot(trie: CompressedTrie) -> str:
    lines = []
    for node, _depth in trie.walk():
        n = trie.arena[node]
        if n.range is None:
            lines.append(f'n{node} [label="root"];')
        else:
            attrs = ' shape="box"' if n.is_leaf() else ""
            lines.append(f'n{node} [label="{trie.spelled(node)}"{attrs}];')
        for child in trie.arena.children(node):
            lines.append(f'n{node} -> n{child} [label="{trie.edge_text(child)}"];')
    dot = "\n".join(lines)
    return f"""digraph {{
rankdir=LR;
node [shape="ellipse" fontname="Helvetica"];
{dot}
}}
"""
