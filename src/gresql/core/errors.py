class QuerySyntaxError(ValueError):
    """Base error for a search query that cannot be parsed."""

    def __init__(self, query: str, message: str) -> None:
        self.query = query
        super().__init__(f"Invalid search query '{query}': {message}")


class InvalidStatementType(QuerySyntaxError):
    """The type part of a query contains a character with no statement type."""

    def __init__(self, query: str, code: str) -> None:
        self.code = code
        super().__init__(
            query, f"unknown statement type '{code}' (expected one of d, i, m, s, u or '*')"
        )


class EmptyTableList(QuerySyntaxError):
    """The query names no tables."""

    def __init__(self, query: str) -> None:
        super().__init__(query, "no table names given")


class UnreadableFile(Exception):
    """A collected file could not be opened or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read '{path}': {reason}")
