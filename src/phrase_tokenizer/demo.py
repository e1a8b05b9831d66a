# src/phrase_tokenizer/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: tokenize a phrase (or show its parenthetical graph) as JSON."""
    from .parenthetical import GraphOptions, graph_parentheticals
    from .tokenizer import tokenize
    from .utils.stop_words import combine_stop_words, load_stop_words, nltk_stop_words

    parser = argparse.ArgumentParser(
        prog="phrase-tokenize",
        description="Tokenize short noisy phrases (codes, references, addresses) for search.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Phrase to tokenize (e.g. Fire Sprinklers- 1185 E. Grand-New plan)",
    )
    parser.add_argument(
        "--stop-words",
        dest="stop_words",
        default=None,
        help="Name of a stop-word list under data/ (e.g. stop_words)",
    )
    parser.add_argument(
        "--nltk",
        action="append",
        default=[],
        metavar="LANG",
        help="Add NLTK stopwords for LANG (repeatable)",
    )
    parser.add_argument("--graph", action="store_true", help="Print the parenthetical graph")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    text = " ".join(args.text) or "Fire Sprinklers- 1185 E. Grand-New plan"

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.graph:
            graph = graph_parentheticals(text, GraphOptions.REMOVE_EMPTY_ENTRIES)
            print(json.dumps([str(t) for t in graph], ensure_ascii=False))
            return 0

        stop_words = None
        if args.stop_words or args.nltk:
            stop_words = combine_stop_words(
                load_stop_words(args.stop_words) if args.stop_words else None,
                *(nltk_stop_words(lang) for lang in args.nltk),
            )
        print(json.dumps(tokenize(text, stop_words), ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
