"""Database session, SQL builders and service layer."""
