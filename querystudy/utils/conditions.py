"""동적 쿼리 조건 조립 유틸리티.

Dynamic predicate assembly utilities.
Builds WHERE clauses from optional inputs: a None clause contributes
nothing, so callers can pass ``username_eq(None)`` freely.

Usage:
    builder = ConditionBuilder()
    if username is not None:
        builder.and_(Member.username == username)
    query = builder.apply(select(Member))

    query = where_all(select(Member), username_eq(name), age_eq(age))
"""

from typing import Any

from sqlalchemy import Select, and_, or_
from sqlalchemy.sql.elements import ColumnElement


def has_text(value: str | None) -> bool:
    """공백이 아닌 문자가 하나라도 있는지 확인합니다.

    Return True when the value contains at least one non-whitespace character.
    """
    return value is not None and value.strip() != ""


def all_of(*clauses: ColumnElement[bool] | None) -> ColumnElement[bool] | None:
    """None이 아닌 조건들을 AND로 묶습니다.

    AND together the non-None clauses.

    Returns:
        ColumnElement[bool] | None: 조합된 조건, 남은 조건이 없으면 None
            (Combined clause, or None when every input was None)
    """
    present: list[ColumnElement[bool]] = [c for c in clauses if c is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return and_(*present)


def where_all(query: Select[Any], *clauses: ColumnElement[bool] | None) -> Select[Any]:
    """None을 제외한 조건들을 WHERE 절에 추가합니다.

    Apply every non-None clause to the query's WHERE (joined with AND).
    """
    present: list[ColumnElement[bool]] = [c for c in clauses if c is not None]
    if present:
        query = query.where(*present)
    return query


class ConditionBuilder:
    """조건을 누적해 하나의 불리언 표현식으로 만드는 빌더.

    Accumulates clauses into a single boolean expression. ``and_`` and
    ``or_`` ignore None so optional filters can be chained unconditionally.
    """

    def __init__(self, initial: ColumnElement[bool] | None = None) -> None:
        self._clause: ColumnElement[bool] | None = initial

    def and_(self, clause: ColumnElement[bool] | None) -> "ConditionBuilder":
        if clause is not None:
            self._clause = clause if self._clause is None else and_(self._clause, clause)
        return self

    def or_(self, clause: ColumnElement[bool] | None) -> "ConditionBuilder":
        if clause is not None:
            self._clause = clause if self._clause is None else or_(self._clause, clause)
        return self

    def has_value(self) -> bool:
        return self._clause is not None

    def build(self) -> ColumnElement[bool] | None:
        return self._clause

    def apply(self, query: Select[Any]) -> Select[Any]:
        """누적된 조건이 있으면 WHERE 절에 추가합니다.

        Apply the accumulated clause, if any, to the query.
        """
        if self._clause is None:
            return query
        return query.where(self._clause)
