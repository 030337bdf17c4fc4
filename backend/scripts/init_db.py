"""Initialize the database - creates all DevConnect tables."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.database import engine, Base
import app.models  # noqa: F401 - registers all models


def init_db():
    print(f"Creating tables on {settings.DATABASE_URL} ...")
    Base.metadata.create_all(bind=engine)
    print("Tables: " + ", ".join(sorted(Base.metadata.tables)))
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
