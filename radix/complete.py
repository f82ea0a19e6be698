#!/usr/bin/env python
"""Load a word list into a compressed trie and print completions for prefixes."""

import argparse
import time

from radix.args import add_standard_args, get_trie_from_args
from radix.tree_printer import print_tree, to_dot


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print all dictionary words that start with each prefix.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "prefixes",
        nargs="*",
        help="Prefixes to complete. The empty string matches every word.",
    )
    parser.add_argument(
        "--print_tree",
        action="store_true",
        help="Dump the trie structure before printing completions.",
    )
    parser.add_argument(
        "--dot",
        action="store_true",
        help="Print the trie as Graphviz DOT and exit.",
    )
    parser.add_argument(
        "--omit_times",
        action="store_true",
        help="Omit times from output, to get deterministic output.",
    )
    args = parser.parse_args(argv)

    start_s = time.time()
    trie = get_trie_from_args(args)
    end_s = time.time()

    if args.dot:
        print(to_dot(trie), end="")
        return

    msg = f"Loaded {trie.size()} words into {trie.num_nodes()} nodes"
    if args.omit_times:
        print(f"{msg}.")
    else:
        print(f"{msg} in {end_s - start_s:.02f}s.")

    if args.print_tree:
        print_tree(trie)

    for prefix in args.prefixes:
        words = trie.completion_words(prefix)
        print(f"{prefix}: {' '.join(words) if words else '(none)'}")


if __name__ == "__main__":
    main()
