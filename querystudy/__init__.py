"""querystudy — SQLAlchemy 동적 쿼리 학습 프로젝트.

Dynamic, composable SQLAlchemy queries over a Member/Team schema:
optional predicates, left-join projections, pagination with count
short-circuiting, aggregation and bulk statements.
"""

__version__ = "1.0.0"
