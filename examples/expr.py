from earlpy import Grammar, Lexer, Recognizer

input = b"""
(1 + 2 * 3 * (1 + 2)) * 2
"""

# left recursive on purpose, no rewriting needed
ExprGrammar = Grammar.parse("""
S E
E E PLUS T
E T
T T TIMES F
T F
F LPAREN E RPAREN
F NUM
""")

lex = Lexer(ExprGrammar)
lex.token(rb"\s+")
lex.token(rb"[0-9]+", "NUM", int)
lex.token(rb"\+", "PLUS")
lex.token(rb"\*", "TIMES")
lex.token(rb"\(", "LPAREN")
lex.token(rb"\)", "RPAREN")

r = Recognizer(ExprGrammar)

if __name__ == "__main__":
    eq = input.decode().strip()
    assert(r.recognize(lex.terminals(input)))
    assert(not r.recognize(lex.terminals(b"(1 + 2")))
    print(f"{eq}: ok")
