"""Decide whether a token sequence is in a grammar's language.

    python recognize.py funcdef.cfg BOF DEF ID LPAREN RPAREN COLON INT \\
        BECOMES LBRACE NUM RBRACE EOF

Exits 0 when the word is accepted, 1 when it is rejected and 2 when the
grammar can't be read.
"""
import argparse
import logging
import sys

from earlpy import Grammar, InvalidGrammarError, Recognizer

logger = logging.getLogger("recognize")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Earley recognizer")
    ap.add_argument("grammar", help="grammar file, one production per line")
    ap.add_argument("tokens", nargs="*", help="terminal symbols of the word")
    ap.add_argument("--chart", action="store_true", help="print the finished chart")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    # flags may sit between the grammar and the tokens
    args = ap.parse_intermixed_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        g = Grammar.load(args.grammar)
    except (OSError, InvalidGrammarError) as e:
        logger.error("%s: %s", args.grammar, e)
        return 2

    r = Recognizer(g)
    if args.chart:
        chart = r.chart(args.tokens)
        print(chart.table())
        ok = chart.accepts(g.start)
    else:
        ok = r.recognize(args.tokens)

    print("accepted" if ok else "rejected")
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
