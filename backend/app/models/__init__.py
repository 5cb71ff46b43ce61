"""ORM Models — SQLAlchemy declarative models for the hosted tables."""

from app.models.post import Post  # noqa: F401
