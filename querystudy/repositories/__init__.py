"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Contains all repository classes that handle pure database operations.
Entity repositories extend BaseRepository; the query demonstration
repositories (dynamic, projection, SQL function, bulk) stand alone.
Reusable search conditions live in ``predicates``.
"""
