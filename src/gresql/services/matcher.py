from gresql.core.models import FileResult, PredicateMatch, QueryPredicate, Statement


def match_statements(
    path: str, statements: list[Statement], predicates: list[QueryPredicate]
) -> FileResult:
    """Checks a file's statements against every predicate of the run.

    The file matches when each predicate is satisfied by at least one statement.
    Statements that satisfy a predicate are recorded under it in file order.
    """
    matches = [
        PredicateMatch(
            predicate=predicate,
            statements=[statement for statement in statements if predicate.matches(statement)],
        )
        for predicate in predicates
    ]
    return FileResult(path=path, statements=statements, matches=matches)
