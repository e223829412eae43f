"""쿼리 결과 행을 DTO로 변환하는 프로젝션 유틸리티.

Projection utilities converting result rows into pydantic DTOs.

Strategies:
    - bean: 행의 속성 이름으로 채움 (Fill by attribute access on the row)
    - fields: 컬럼 라벨을 필드 이름에 매핑 (Map column labels to field names)
    - constructor: 선언 순서대로 위치 기반 매핑 (Positional, by field declaration order)
    - DtoBundle: 쿼리 자체가 DTO를 반환 (The query yields DTOs directly)
"""

from typing import Any, Callable, TypeVar

from pydantic import BaseModel
from sqlalchemy import Row
from sqlalchemy.orm import Bundle

DtoType = TypeVar("DtoType", bound=BaseModel)


class ProjectionError(ValueError):
    """위치 기반 프로젝션의 컬럼 수가 DTO 필드 수와 다를 때 발생.

    Raised when a positional projection's column count does not match
    the DTO's field count.
    """


class Projections:
    """행 → DTO 변환 함수 팩토리.

    Factories for row-to-DTO converters, one per projection strategy.
    """

    @staticmethod
    def bean(dto_cls: type[DtoType]) -> Callable[[Row[Any]], DtoType]:
        """행 속성 접근으로 DTO를 채웁니다 (getter/setter 방식).

        Populate the DTO by reading attributes off the row. Attributes the
        row does not carry keep the DTO default.
        """

        def convert(row: Row[Any]) -> DtoType:
            return dto_cls.model_validate(row, from_attributes=True)

        return convert

    @staticmethod
    def fields(dto_cls: type[DtoType]) -> Callable[[Row[Any]], DtoType]:
        """컬럼 라벨을 필드 이름으로 매핑합니다.

        Map column labels to field names. Columns must be labelled with the
        DTO's field names (``Member.username.label("name")``).
        """

        def convert(row: Row[Any]) -> DtoType:
            return dto_cls.model_validate(dict(row._mapping))

        return convert

    @staticmethod
    def constructor(dto_cls: type[DtoType]) -> Callable[[Row[Any]], DtoType]:
        """선언된 필드 순서대로 위치 기반 매핑합니다.

        Map columns positionally onto the DTO's fields in declaration order,
        ignoring column names.

        Raises:
            ProjectionError: 컬럼 수와 필드 수가 다를 때 (Arity mismatch)
        """
        names: list[str] = list(dto_cls.model_fields)

        def convert(row: Row[Any]) -> DtoType:
            if len(row) != len(names):
                raise ProjectionError(
                    f"{dto_cls.__name__} expects {len(names)} columns, got {len(row)}"
                )
            return dto_cls(**dict(zip(names, row)))

        return convert


class DtoBundle(Bundle):
    """SELECT 절에서 바로 DTO를 만들어 주는 번들.

    A Bundle whose rows come back as instances of ``dto_cls``. Each
    expression's label must match a DTO field name.

    Usage:
        select(DtoBundle(MemberDto, Member.username, Member.age))
    """

    def __init__(self, dto_cls: type[BaseModel], *exprs: Any, **kw: Any) -> None:
        super().__init__(dto_cls.__name__, *exprs, **kw)
        self.dto_cls = dto_cls

    def create_row_processor(self, query, procs, labels):  # type: ignore[no-untyped-def]
        dto_cls = self.dto_cls

        def proc(row):  # type: ignore[no-untyped-def]
            return dto_cls(**dict(zip(labels, (p(row) for p in procs))))

        return proc
