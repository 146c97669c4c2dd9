"""SQLAlchemy-backed persistence."""
