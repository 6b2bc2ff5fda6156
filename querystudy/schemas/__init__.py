"""Pydantic 스키마 패키지 — 검색 조건 및 프로젝션 응답.

Pydantic schema package — search conditions and projection responses.
"""
