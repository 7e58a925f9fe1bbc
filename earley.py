import logging
import typing
from collections import deque

from grammar import InvalidArgumentError

logger = logging.getLogger(__name__)

class Item(typing.NamedTuple):
    name: str
    rhs: typing.Tuple[str, ...]
    pos: int
    origin: int

    def done(self):
        return self.pos >= len(self.rhs)

    def sym(self):
        if self.pos < len(self.rhs):
            return self.rhs[self.pos]

    def advance(self):
        return Item(self.name, self.rhs, self.pos + 1, self.origin)

    def __str__(self):
        dotted = self.rhs[:self.pos] + (".",) + self.rhs[self.pos:]
        return f"{self.name} -> {' '.join(dotted)}"

class Chart(list):
    # one insertion ordered set of items per input position. dict keys
    # keep the order stable so dumps of the same run always match.
    def __init__(self, n):
        super(Chart, self).__init__(dict() for _ in range(n + 1))

    def add(self, i, item):
        cell = self[i]
        if item in cell:
            return False
        cell[item] = None
        return True

    def waiting(self, i, sym):
        # snapshot, cell i may grow while the caller adds advances
        return [x for x in self[i] if x.sym() == sym]

    def accepts(self, start):
        # a finished start item from a later origin only covers a suffix
        return any(x.done() and x.name == start and x.origin == 0 for x in self[-1])

    def table(self):
        import tabulate
        rows = [(i, str(x), x.origin) for i, cell in enumerate(self) for x in cell]
        return tabulate.tabulate(rows, headers=["pos", "item", "origin"])

class Recognizer:
    """Earley recognizer over a read-only Grammar.

    A word is accepted when a finished item named after the start symbol
    spans the whole input, from position 0 to the last position. The
    start symbol may appear on right-hand sides; items for it predicted
    at later positions never decide the verdict.
    """

    def __init__(self, grammar):
        if grammar is None:
            raise InvalidArgumentError("grammar must not be None")
        self._grammar = grammar

    @property
    def grammar(self):
        return self._grammar

    def recognize(self, word):
        word = self._word(word)
        rv = self._run(word).accepts(self._grammar.start)
        logger.debug("%s: %d tokens", "accepted" if rv else "rejected", len(word))
        return rv

    def chart(self, word):
        return self._run(self._word(word))

    def _word(self, word):
        if word is None:
            raise InvalidArgumentError("word must not be None")
        if isinstance(word, (str, bytes)):
            raise InvalidArgumentError("word must be a sequence of tokens, not a string")
        return tuple(word)

    def _run(self, word):
        grammar = self._grammar
        chart = Chart(len(word))
        q = deque()

        for p in grammar.rules(grammar.start):
            item = Item(p.lhs, p.rhs, 0, 0)
            if chart.add(0, item):
                q.append(item)

        for i in range(len(chart)):
            # scanned items wait here until position i is closed
            scanned = []
            while q:
                item = q.popleft()
                sym = item.sym()
                if sym is None:
                    self._complete(chart, i, item, q)
                elif grammar.isprod(sym):
                    self._predict(chart, i, item, sym, q)
                elif i < len(word) and word[i] == sym:
                    nxt = item.advance()
                    if chart.add(i + 1, nxt):
                        scanned.append(nxt)
            logger.debug("position %d: %d items", i, len(chart[i]))
            q.extend(scanned)

        return chart

    def _complete(self, chart, i, item, q):
        for parent in chart.waiting(item.origin, item.name):
            nxt = parent.advance()
            if chart.add(i, nxt):
                q.append(nxt)

    def _predict(self, chart, i, item, sym, q):
        for p in self._grammar.rules(sym):
            nxt = Item(p.lhs, p.rhs, 0, i)
            if chart.add(i, nxt):
                q.append(nxt)

        # a nullable sym may already have completed at i before this
        # item arrived, so step over it here instead of waiting for a
        # completion that won't be queued again
        if self._grammar.isnullable(sym):
            nxt = item.advance()
            if chart.add(i, nxt):
                q.append(nxt)
