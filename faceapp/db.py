import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()

MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def sqlite_path(url):
    """Filesystem path of a file-backed SQLite URL, else None."""
    if url in MEMORY_URLS or not url.startswith("sqlite:///"):
        return None
    return url[len("sqlite:///"):]


def make_engine(url):
    """Engine for the credential database. In-memory SQLite shares one connection."""
    if url in MEMORY_URLS:
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    db_path = sqlite_path(url)
    if db_path is not None:
        # SQLite will not create missing parent directories on its own
        parent = os.path.dirname(db_path)
        if parent:
            os.makedirs(parent, mode=0o700, exist_ok=True)
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(url, pool_pre_ping=True)


def make_session_factory(engine):
    Base.metadata.create_all(bind=engine)
    db_path = sqlite_path(str(engine.url))
    if db_path is not None and os.path.exists(db_path):
        # Tokens are readable by the owner only
        os.chmod(db_path, 0o600)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
