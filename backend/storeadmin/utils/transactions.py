from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session


@contextmanager
def atomic(session: Session) -> Iterator[Session]:
    """
    Run a unit of work on the given Session as one transaction.
    Commits when the block exits cleanly, rolls back and re-raises otherwise.
    Usage:
        with atomic(db):
            ... DB work ...
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
