from grammar import Grammar, Production, InvalidGrammarError, InvalidArgumentError
from earley import Chart, Item, Recognizer
from lexer import Lexer, LexerError, UnexpectedCharacter

__all__ = [
    "Grammar", "Production", "InvalidGrammarError", "InvalidArgumentError",
    "Chart", "Item", "Recognizer",
    "Lexer", "LexerError", "UnexpectedCharacter",
    "recognize",
]

def recognize(grammar, word):
    # grammar may be a Grammar or text in the one-production-per-line format
    if grammar is None:
        raise InvalidArgumentError("grammar must not be None")
    if isinstance(grammar, str):
        grammar = Grammar.parse(grammar)
    return Recognizer(grammar).recognize(word)
