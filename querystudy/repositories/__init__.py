"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Each repository owns a family of query patterns as named coroutines that
take the session as their first argument:

    member_repository: 동적 검색, 페이징 검색, 벌크 연산
                       (Dynamic search, paged search, bulk operations)
    member_query_repository: 필터, 정렬, 집계, 조인, 서브쿼리
                             (Filters, sorting, aggregation, joins, subqueries)
    member_projection_repository: CASE, 상수, 문자열 연결, DTO 프로젝션, SQL 함수
                                  (CASE, constants, concat, DTO projections, SQL functions)
    team_repository: 팀 조회 (Team lookups)
"""
