"""Database package — SQLAlchemy declarative Base shared by models and migrations."""
