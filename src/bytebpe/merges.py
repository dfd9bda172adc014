"""Ordered, immutable table of learned merge rules."""

from collections.abc import Iterable, Iterator, Mapping

from .config import BASE_VOCAB_SIZE
from .errors import InvalidMergeTableError
from .types import MergeRule, Token, TokenPair


class MergeTable(Mapping[TokenPair, Token]):
    """
    Merge rules in the order they were learned.

    Behaves as a read-only mapping of ``pair -> merged token``. Iteration
    follows training order, which is also the priority order used when
    encoding. Merged token ids must be dense and strictly increasing from
    ``vocab_start``.

    Example:
       >>> table = MergeTable([((97, 97), 256), ((256, 98), 257)])
       >>> table[(97, 97)]
       256
       >>> table.rules
       (((97, 97), 256), ((256, 98), 257))
    """

    __slots__ = ("_rules", "_lookup", "_vocab_start")

    def __init__(
        self,
        rules: Iterable[MergeRule] = (),
        vocab_start: int = BASE_VOCAB_SIZE,
    ) -> None:
        """
        Build a table from ``(pair, token)`` rules.

        :param rules: Rules in training order.
        :param vocab_start: Id expected for the first rule.
        :raises InvalidMergeTableError: If ``vocab_start`` falls inside the
            byte range, ids are not dense and increasing from ``vocab_start``,
            or a pair is repeated.
        """
        # merged tokens may never shadow the single-byte tokens
        if vocab_start < BASE_VOCAB_SIZE:
            raise InvalidMergeTableError(
                f"merge tokens must start at {BASE_VOCAB_SIZE} or above",
                invalid_tok=vocab_start,
            )

        ordered: list[MergeRule] = []
        lookup: dict[TokenPair, Token] = {}

        expected = vocab_start
        for (tok0, tok1), mtok in rules:
            pair: TokenPair = (tok0, tok1)
            if mtok != expected:
                raise InvalidMergeTableError(
                    f"expected merge token {expected}", pair=pair, invalid_tok=mtok
                )
            if pair in lookup:
                raise InvalidMergeTableError("duplicate merge rule", pair=pair)
            ordered.append((pair, mtok))
            lookup[pair] = mtok
            expected += 1

        self._rules: tuple[MergeRule, ...] = tuple(ordered)
        self._lookup = lookup
        self._vocab_start = vocab_start

    def __getitem__(self, pair: TokenPair) -> Token:
        return self._lookup[pair]

    def __iter__(self) -> Iterator[TokenPair]:
        return (pair for pair, _ in self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, pair: object) -> bool:
        return pair in self._lookup

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._rules)!r}, vocab_start={self._vocab_start})"

    @property
    def rules(self) -> tuple[MergeRule, ...]:
        """Rules as ``(pair, token)`` tuples in training order."""
        return self._rules

    @property
    def vocab_start(self) -> int:
        return self._vocab_start

    @property
    def next_token(self) -> Token:
        """Id the next learned merge would receive."""
        return self._vocab_start + len(self._rules)
