# delivery_tracker/config/database.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .settings import settings
from delivery_tracker.shared.database.models import Base

logger = logging.getLogger(__name__)

engine_kwargs = {
    "pool_pre_ping": True,
    "pool_recycle": 300,
    "echo": settings.debug
}

# SQLite connections are shared across the threadpool that runs handlers
if settings.is_sqlite:
    engine_kwargs["connect_args"] = {
        "check_same_thread": False
    }

# Create engine
engine = create_engine(
    settings.database_url,
    **engine_kwargs
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(bind=None):
    """Create the packages and geo_locations tables if missing"""
    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info("Database schema ready")

# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
