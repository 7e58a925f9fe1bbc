import logging
import re

logger = logging.getLogger(__name__)

class LexerError(ValueError):
    """Generic lexer error"""

class UnexpectedCharacter(LexerError):
    """Unexpected character in input"""

    def __init__(self, char, offset):
        super(UnexpectedCharacter, self).__init__(f"unexpected {char!r} at offset {offset}")
        self.char = char
        self.offset = offset

class TokenMatcher:
    def __init__(self, pat, tok=None, val=None, lookahead=None):
        self._creg = re.compile(pat)
        if self._creg.match(pat[:0]):
            raise ValueError("Token regex may not match empty string")
        self._val = val
        self._tok = tok
        self._lookahead = re.compile(lookahead) if lookahead is not None else None

    @property
    def ident(self):
        return self._tok

    def match(self, buf, idx):
        m = self._creg.match(buf, idx)
        # zero width matches (lookbehind, \b) never consume input
        if m and m.end() > m.start() and (self._lookahead is None or self._lookahead.match(buf, m.end())):
            n = m.end() - m.start()
            if callable(self._val):
                return n, self._val(m.group(0))
            elif self._val is None:
                return n, m.group(0)
            else:
                return n, self._val

class Lexer:
    # splits a buffer into (terminal, value) pairs for a grammar. rules
    # registered without a terminal are matched and dropped.
    def __init__(self, grammar):
        self._tokens = []
        self._grammar = grammar

    def __len__(self):
        return len(self._tokens)

    def token(self, pat, tok=None, val=None, lookahead=None):
        if tok is not None:
            if not self._grammar.isterm(tok):
                raise ValueError(f"Invalid token: {tok}")
        self._tokens.append(TokenMatcher(pat, tok, val, lookahead))
        return tok

    def _nexttok(self, buf, idx):
        # longest match wins, the earliest rule wins a tie
        tlen = 0
        tval = None
        ttok = None
        found = False
        for tok in self._tokens:
            m = tok.match(buf, idx)
            if m:
                if m[0] > tlen or not found:
                    found = True
                    tlen, tval = m
                    ttok = tok.ident
        if not found:
            raise UnexpectedCharacter(buf[idx:idx + 1], idx)
        return tlen, ttok, tval

    def lex(self, buf):
        idx = 0
        while idx < len(buf):
            n, tok, val = self._nexttok(buf, idx)
            idx += n
            if tok is not None:
                yield tok, val

    def tokenize(self, buf):
        toks = list(self.lex(buf))
        logger.debug("lexed %d tokens from %d characters", len(toks), len(buf))
        return toks

    def terminals(self, buf):
        return [tok for tok, _ in self.tokenize(buf)]
