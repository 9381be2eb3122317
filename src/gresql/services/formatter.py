from collections.abc import Iterator

from gresql.core.models import FileResult, Statement


class ResultFormatter:
    """Renders matched files as delimited text lines.

    Statement lines are `path, first line, last line, TYPE, tables[, text]`.
    The suppression flags only change what is printed, never what matched.
    """

    def __init__(
        self,
        delimiter: str = ",",
        path_only: bool = False,
        hide_statement: bool = False,
        table_separator: str = ";",
    ) -> None:
        self.delimiter = delimiter
        self.path_only = path_only
        self.hide_statement = hide_statement
        self.table_separator = table_separator

    def format(self, results: list[FileResult]) -> Iterator[str]:
        for result in results:
            if not result.matched:
                continue

            if self.path_only:
                yield result.path
                continue

            for match in result.matches:
                for statement in match.statements:
                    yield self._format_statement(result.path, statement)

    def _format_statement(self, path: str, statement: Statement) -> str:
        fields = [
            path,
            str(statement.start_line),
            str(statement.end_line),
            statement.statement_type.value,
            self.table_separator.join(statement.tables),
        ]
        if not self.hide_statement:
            # Collapse the statement onto one line so each match is one record
            fields.append(" ".join(statement.text.split()))
        return self.delimiter.join(fields)
