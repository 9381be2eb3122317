from gresql.core.models import StatementType
from gresql.infrastructure.parsing.lexer import Token


def classify(tokens: list[Token]) -> StatementType | None:
    """Maps the leading keyword of a statement to its type.

    Leading semicolons are skipped. Returns None for anything that is not a
    SELECT, INSERT, UPDATE, DELETE or MERGE (BEGIN, DDL, WITH, ...).
    """
    for token in tokens:
        if token.text == ";":
            continue
        if not token.is_identifier:
            return None
        return StatementType.from_keyword(token.text)
    return None
