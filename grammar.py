import logging
import typing
from collections import deque

logger = logging.getLogger(__name__)

class InvalidGrammarError(ValueError):
    """Grammar has no productions"""

class InvalidArgumentError(TypeError):
    """Missing grammar or word"""

class Production(typing.NamedTuple):
    lhs: str
    rhs: typing.Tuple[str, ...]

    def __str__(self):
        return f"{self.lhs} -> {' '.join(self.rhs)}".rstrip()

class Grammar:
    # read-only view of a context free grammar. the start symbol is
    # the lhs of the first production, every symbol that never shows
    # up as an lhs is a terminal.
    def __init__(self, productions):
        if productions is None:
            raise InvalidGrammarError("productions must not be None")

        self._productions = tuple(Production(lhs, tuple(rhs)) for lhs, rhs in productions)
        if not self._productions:
            raise InvalidGrammarError("productions must not be empty")

        lookup = {}
        for p in self._productions:
            lookup.setdefault(p.lhs, []).append(p)
        self._lookup = {lhs: tuple(rules) for lhs, rules in lookup.items()}

        self._start = self._productions[0].lhs
        self._nonterminals = frozenset(self._lookup)
        self._terminals = frozenset(s for p in self._productions for s in p.rhs
                                    if s not in self._nonterminals)
        self._nullable = self._populate_nullable()

        logger.debug("grammar: %d productions, %d nonterminals, %d terminals",
                     len(self._productions), len(self._nonterminals), len(self._terminals))

    @classmethod
    def parse(cls, text):
        productions = []
        for line in text.splitlines():
            parts = line.split()
            if parts:
                productions.append(Production(parts[0], tuple(parts[1:])))
        return cls(productions)

    @classmethod
    def load(cls, path):
        with open(path, "r") as f:
            return cls.parse(f.read())

    def _populate_nullable(self):
        # rules with an empty rhs seed the set, then any rule whose
        # rhs is entirely nullable makes its lhs nullable. walk the
        # users of each newly nullable symbol until nothing changes.
        users = {}
        for p in self._productions:
            for s in p.rhs:
                users.setdefault(s, []).append(p)

        nullable = set(p.lhs for p in self._productions if not p.rhs)
        q = deque(nullable)
        while q:
            sym = q.popleft()
            for p in users.get(sym, ()):
                if p.lhs not in nullable and all(s in nullable for s in p.rhs):
                    nullable.add(p.lhs)
                    q.append(p.lhs)

        return frozenset(nullable)

    @property
    def start(self):
        return self._start

    @property
    def nonterminals(self):
        return self._nonterminals

    @property
    def terminals(self):
        return self._terminals

    @property
    def nullable(self):
        return self._nullable

    @property
    def productions(self):
        return self._productions

    def rules(self, lhs):
        return self._lookup.get(lhs, ())

    productions_for = rules

    def isprod(self, sym):
        return sym in self._nonterminals

    is_nonterminal = isprod

    def isterm(self, sym):
        return sym in self._terminals

    def isnullable(self, sym):
        return sym in self._nullable

    def __len__(self):
        return len(self._productions)

    def __iter__(self):
        return iter(self._productions)

    def __eq__(self, other):
        if isinstance(other, Grammar):
            return self._productions == other._productions
        return NotImplemented

    def __hash__(self):
        return hash(self._productions)

    def __str__(self):
        # same line format that parse() reads
        return "\n".join(" ".join((p.lhs,) + p.rhs) for p in self._productions)

    def __repr__(self):
        return f"<Grammar {self._start}: {len(self._productions)} productions>"
