"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("recetarre.database")

# Create SQLAlchemy Base
Base = declarative_base()

# Create engine
engine = create_engine(settings.database_url, echo=settings.db_echo, future=True)

# Create session factory
SessionLocal = sessionmaker(bind=engine, autoflush=False, future=True)


def init_database():
    """Initialize database schema"""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
