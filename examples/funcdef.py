import os
import sys

from earlpy import Grammar, Lexer, Recognizer

input = b"""
def area(w: int, h: int): int = {
    a: int = w * h;
    a + 0
}
"""

g = Grammar.load(os.path.join(os.path.dirname(os.path.abspath(__file__)), "funcdef.cfg"))

lex = Lexer(g)
lex.token(rb"\s+")
lex.token(rb"def", "DEF")
lex.token(rb"int", "INT")
lex.token(rb"[a-zA-Z_][a-zA-Z0-9_]*", "ID")
lex.token(rb"[0-9]+", "NUM", int)
lex.token(rb"\(", "LPAREN")
lex.token(rb"\)", "RPAREN")
lex.token(rb"\{", "LBRACE")
lex.token(rb"\}", "RBRACE")
lex.token(rb"\[", "LBRACK")
lex.token(rb"\]", "RBRACK")
lex.token(rb":", "COLON")
lex.token(rb";", "SEMI")
lex.token(rb",", "COMMA")
lex.token(rb"=", "BECOMES")
lex.token(rb"\+", "PLUS")
lex.token(rb"-", "MINUS")
lex.token(rb"\*", "STAR")

r = Recognizer(g)

def check(buf):
    return r.recognize(["BOF"] + lex.terminals(buf) + ["EOF"])

if __name__ == "__main__":
    src = sys.stdin.buffer.read() if len(sys.argv) > 1 and sys.argv[1] == "-" else input
    ok = check(src)
    print("accepted" if ok else "rejected")
    sys.exit(0 if ok else 1)
