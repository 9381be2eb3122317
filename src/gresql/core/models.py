from enum import Enum

from pydantic import BaseModel, ConfigDict


class StatementType(str, Enum):
    """The kinds of DML statement gresql recognizes."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    MERGE = "MERGE"

    @property
    def code(self) -> str:
        """One-character code used in search queries."""
        return self.value[0].lower()

    @classmethod
    def from_code(cls, code: str) -> "StatementType | None":
        for statement_type in cls:
            if statement_type.code == code.lower():
                return statement_type
        return None

    @classmethod
    def from_keyword(cls, keyword: str) -> "StatementType | None":
        try:
            return cls(keyword.upper())
        except ValueError:
            return None


# Type filter used when a query leaves the type part empty or uses '*'.
MODIFYING_TYPES = frozenset(
    {StatementType.DELETE, StatementType.INSERT, StatementType.MERGE, StatementType.UPDATE}
)
ALL_TYPES = frozenset(StatementType)


class Span(BaseModel):
    """A block of source lines the segmenter believes is one statement."""

    model_config = ConfigDict(frozen=True)

    text: str  # Raw source, line breaks kept
    code: str  # Same lines with comments blanked out
    start_line: int
    end_line: int


class Statement(BaseModel):
    """A classified statement and the tables it targets."""

    model_config = ConfigDict(frozen=True)

    statement_type: StatementType
    tables: tuple[str, ...] = ()
    text: str
    start_line: int
    end_line: int


class QueryPredicate(BaseModel):
    """One parsed --search query: OR over its types, OR over its tables."""

    model_config = ConfigDict(frozen=True)

    raw: str = ""
    statement_types: frozenset[StatementType]
    tables: frozenset[str]  # Lower-cased

    def matches(self, statement: Statement) -> bool:
        if statement.statement_type not in self.statement_types:
            return False
        return any(table.lower() in self.tables for table in statement.tables)


class PredicateMatch(BaseModel):
    """The statements of one file that satisfied a predicate."""

    predicate: QueryPredicate
    statements: list[Statement] = []


class SourceFile(BaseModel):
    """A collected SQL file and its decoded text."""

    path: str
    content: str


class FileResult(BaseModel):
    """Outcome of scanning one file against every predicate of a run."""

    path: str
    statements: list[Statement] = []
    matches: list[PredicateMatch] = []
    error: str | None = None

    @property
    def matched(self) -> bool:
        if self.error is not None or not self.matches:
            return False
        return all(match.statements for match in self.matches)
