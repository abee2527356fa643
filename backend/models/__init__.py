from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """Base class for all database models"""
    pass

# Import all models here for Alembic autogenerate
from models.user import User
from models.company import Company
from models.job import Job

__all__ = ["Base", "User", "Company", "Job"]
