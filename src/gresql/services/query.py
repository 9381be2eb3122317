"""Parsing of the `[<types>]:<tables>` search query mini-language."""

from gresql.core.errors import EmptyTableList, InvalidStatementType
from gresql.core.models import ALL_TYPES, MODIFYING_TYPES, QueryPredicate, StatementType
from gresql.core.ports import IIdentifierNormalizer
from gresql.infrastructure.parsing.normalizers import VerbatimNormalizer


def parse_query(
    raw: str,
    include_select: bool = False,
    normalizer: IIdentifierNormalizer | None = None,
) -> QueryPredicate:
    """Parses one --search value into a predicate.

    Args:
        raw: The query, e.g. `u:orders`, `ud:orders,customers`, `*:orders` or `orders`.
        include_select: Let an omitted, empty or `*` type part match SELECT too.
        normalizer: Applied to each table name; defaults to keeping names as written.

    Raises:
        InvalidStatementType: The type part holds a character other than d, i, m, s, u.
        EmptyTableList: No table names remain after splitting on commas.
    """
    if normalizer is None:
        normalizer = VerbatimNormalizer()

    type_part, colon, table_part = raw.partition(":")
    if not colon:
        type_part, table_part = "", raw

    type_part = type_part.strip()
    if type_part in ("", "*"):
        statement_types = ALL_TYPES if include_select else MODIFYING_TYPES
    else:
        statement_types = frozenset(_parse_type_code(raw, code) for code in type_part)

    tables = frozenset(
        normalizer.normalize(name).lower() for name in table_part.split(",") if name.strip()
    )
    if not tables:
        raise EmptyTableList(raw)

    return QueryPredicate(raw=raw, statement_types=statement_types, tables=tables)


def parse_queries(
    raws: list[str],
    include_select: bool = False,
    normalizer: IIdentifierNormalizer | None = None,
) -> list[QueryPredicate]:
    """Parses every --search value; the run requires all of them to match."""
    return [parse_query(raw, include_select, normalizer) for raw in raws]


def _parse_type_code(raw: str, code: str) -> StatementType:
    statement_type = StatementType.from_code(code)
    if statement_type is None:
        raise InvalidStatementType(raw, code)
    return statement_type
