"""Target table extraction for classified statements.

Every statement type has its own extraction method, chosen through a single
lookup on the statement type. Extraction only looks at tokens outside
parentheses, so sub-selects, column lists and function arguments never
contribute tables.
"""

from collections.abc import Callable
from typing import NamedTuple

from loguru import logger

from gresql.core.models import StatementType
from gresql.core.ports import IIdentifierNormalizer
from gresql.infrastructure.parsing.lexer import Token, top_level

# Words that end a table reference and can never be an alias.
_CLAUSE_KEYWORDS = frozenset(
    {
        "AND", "APPLY", "AS", "BEGIN", "CROSS", "DECLARE", "DEFAULT", "DELETE", "ELSE",
        "END", "EXCEPT", "EXEC", "EXECUTE", "FETCH", "FOR", "FROM", "FULL", "GO",
        "GROUP", "HAVING", "IF", "INNER", "INSERT", "INTERSECT", "INTO", "JOIN", "LEFT",
        "LIMIT", "MERGE", "NATURAL", "NOT", "OFFSET", "ON", "OPTION", "OR", "ORDER",
        "OUTER", "OUTPUT", "PERCENT", "PIVOT", "RETURN", "RETURNING", "RIGHT", "SELECT",
        "SET", "TABLESAMPLE", "THEN", "TOP", "UNION", "UNPIVOT", "UPDATE", "USING",
        "VALUES", "WHEN", "WHERE", "WHILE", "WINDOW", "WITH",
    }
)  # fmt: skip

# Keywords that introduce a table in a FROM/JOIN chain.
_CHAIN_KEYWORDS = frozenset({"FROM", "JOIN"})


class TableBinding(NamedTuple):
    """A table introduced by FROM or JOIN, with its alias if one was given."""

    table: str
    alias: str | None


def _keyword_at(tokens: list[Token], index: int) -> str:
    return tokens[index].keyword if index < len(tokens) else ""


def _is_name(token: Token) -> bool:
    return token.is_identifier and token.keyword not in _CLAUSE_KEYWORDS


def _unique(tables: list[str]) -> tuple[str, ...]:
    """Deduplicates case-insensitively, keeping the first spelling seen."""
    seen: dict[str, str] = {}
    for table in tables:
        seen.setdefault(table.lower(), table)
    return tuple(seen.values())


class TableExtractor:
    """Resolves the tables a statement targets, following FROM/JOIN alias chains."""

    def __init__(self, normalizer: IIdentifierNormalizer) -> None:
        self.normalizer = normalizer
        self._extractors: dict[StatementType, Callable[[list[Token]], list[str]]] = {
            StatementType.SELECT: self._extract_select,
            StatementType.INSERT: self._extract_into_target,
            StatementType.MERGE: self._extract_into_target,
            StatementType.DELETE: self._extract_delete,
            StatementType.UPDATE: self._extract_update,
        }

    def extract(self, statement_type: StatementType, tokens: list[Token]) -> tuple[str, ...]:
        """Returns the deduplicated target tables, or an empty tuple when none resolve."""
        return _unique(self._extractors[statement_type](top_level(tokens)))

    def _name_at(self, tokens: list[Token], index: int) -> str | None:
        if index < len(tokens) and _is_name(tokens[index]):
            return self.normalizer.normalize(tokens[index].text)
        return None

    def _after_keyword(self, tokens: list[Token]) -> int:
        """Index just past the leading statement keyword and any TOP (n) [PERCENT]."""
        index = 0
        while index < len(tokens) and tokens[index].text == ";":
            index += 1
        index += 1

        if _keyword_at(tokens, index) == "TOP":
            index += 1
            # '(' and ')' are adjacent here because the expression between them is nested
            index += 2 if _keyword_at(tokens, index) == "(" else 1
            if _keyword_at(tokens, index) == "PERCENT":
                index += 1
        return index

    def _binding_at(self, tokens: list[Token], index: int) -> tuple[TableBinding | None, int]:
        """Reads `table [[AS] alias]` starting at index; returns the binding and next index."""
        table = self._name_at(tokens, index)
        if table is None:
            return None, index

        index += 1
        if _keyword_at(tokens, index) == "AS":
            index += 1
        alias = self._name_at(tokens, index)
        if alias is not None:
            index += 1
        return TableBinding(table, alias), index

    def _walk_chain(self, tokens: list[Token], start: int) -> list[TableBinding]:
        """Collects every FROM and JOIN binding from start onwards, in order."""
        bindings: list[TableBinding] = []
        index = start
        while index < len(tokens):
            if tokens[index].keyword in _CHAIN_KEYWORDS:
                binding, index = self._binding_at(tokens, index + 1)
                if binding is not None:
                    bindings.append(binding)
                continue
            index += 1
        return bindings

    def _extract_select(self, tokens: list[Token]) -> list[str]:
        return [binding.table for binding in self._walk_chain(tokens, self._after_keyword(tokens))]

    def _extract_into_target(self, tokens: list[Token]) -> list[str]:
        """INSERT and MERGE: the table after INTO, or directly after the keyword."""
        index = self._after_keyword(tokens)
        if _keyword_at(tokens, index) == "INTO":
            index += 1
        table = self._name_at(tokens, index)
        return [table] if table is not None else []

    def _extract_delete(self, tokens: list[Token]) -> list[str]:
        start = self._after_keyword(tokens)
        bindings = self._walk_chain(tokens, start)
        if not bindings:
            # DELETE orders WHERE ...
            table = self._name_at(tokens, start)
            return [table] if table is not None else []

        # DELETE FROM o FROM orders o: a chain entry may itself be an alias
        aliases = {binding.alias.lower(): binding.table for binding in bindings if binding.alias}
        return [aliases.get(binding.table.lower(), binding.table) for binding in bindings]

    def _extract_update(self, tokens: list[Token]) -> list[str]:
        index = self._after_keyword(tokens)
        target = self._name_at(tokens, index)
        if target is None:
            return []

        index += 1
        if _keyword_at(tokens, index) == "AS" or self._name_at(tokens, index) is not None:
            # UPDATE orders o SET ...: the target names its own table
            return [target]

        set_index = next(
            (i for i in range(index, len(tokens)) if tokens[i].keyword == "SET"), len(tokens)
        )
        bindings = self._walk_chain(tokens, set_index)
        if not bindings:
            return [target]

        resolved = self._alias_map(bindings).get(target.lower())
        if resolved is None:
            logger.debug("UPDATE target '{}' is not bound by its FROM clause", target)
            return []
        return [resolved]

    @staticmethod
    def _alias_map(bindings: list[TableBinding]) -> dict[str, str]:
        """Builds the alias -> table map for one statement's FROM/JOIN chain."""
        aliases: dict[str, str] = {}
        for binding in bindings:
            aliases[(binding.alias or binding.table).lower()] = binding.table
        # A table given an explicit alias may still be referred to by its own name
        for binding in bindings:
            aliases.setdefault(binding.table.lower(), binding.table)
        return aliases
