"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services orchestrate repositories and raise application errors; the caller
owns the session and decides when to commit.
"""
