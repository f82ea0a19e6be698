"""Standard command-line arguments shared across tools."""

import argparse

from radix.trie import CompressedTrie, make_trie


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="testdata/words.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while inserting words.",
    )


def get_trie_from_args(args: argparse.Namespace) -> CompressedTrie:
    return make_trie(args.dictionary, progress=args.progress)
