"""
Database abstraction for SQL backends and an in-memory test implementation.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from sqlalchemy import Column, Float, Integer, String, create_engine, func, select
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from userbase.validation import validate_user_name

logger = logging.getLogger(__name__)


class DbClient(Protocol):
    """Interface for user persistence."""

    def create_user(self, name: str) -> "UserRecord":
        ...

    def get_user(self, user_id: str) -> Optional["UserRecord"]:
        ...

    def list_users(self, limit: int = 100) -> list["UserRecord"]:
        ...

    def count_users(self) -> int:
        ...


@dataclass
class UserRecord:
    user_id: str
    name: str
    created_at: float = field(default_factory=lambda: time.time())

    def as_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "created_at": self.created_at,
        }


class InMemoryDbClient:
    """Simple in-memory database for development and tests."""

    def __init__(self):
        self.users: Dict[str, UserRecord] = {}

    def create_user(self, name: str) -> UserRecord:
        record = UserRecord(user_id=uuid.uuid4().hex, name=validate_user_name(name))
        self.users[record.user_id] = record
        logger.info("Created user %s", record.user_id)
        return record

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    def list_users(self, limit: int = 100) -> list[UserRecord]:
        # dicts keep insertion order, which is creation order here
        return list(self.users.values())[:limit]

    def count_users(self) -> int:
        return len(self.users)

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.users.clear()


class SqlDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlDbClient")
        self.engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    def _to_user_record(self, row: "UserRow") -> UserRecord:
        return UserRecord(
            user_id=row.user_id,
            name=row.name,
            created_at=row.created_at,
        )

    def create_user(self, name: str) -> UserRecord:
        record = UserRecord(user_id=uuid.uuid4().hex, name=validate_user_name(name))
        with self.Session() as session:
            row = UserRow(
                user_id=record.user_id,
                name=record.name,
                created_at=record.created_at,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            logger.info("Created user %s", row.user_id)
            return self._to_user_record(row)

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self.Session() as session:
            row = session.execute(
                select(UserRow).where(UserRow.user_id == user_id)
            ).scalar_one_or_none()
            if not row:
                return None
            return self._to_user_record(row)

    def list_users(self, limit: int = 100) -> list[UserRecord]:
        with self.Session() as session:
            stmt = (
                select(UserRow)
                .order_by(UserRow.seq.asc())
                .limit(limit)
            )
            rows = session.execute(stmt).scalars().all()
            return [self._to_user_record(row) for row in rows]

    def count_users(self) -> int:
        with self.Session() as session:
            return session.execute(
                select(func.count()).select_from(UserRow)
            ).scalar_one()


Base = declarative_base()


class UserRow(Base):
    __tablename__ = "users"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    created_at = Column(Float, nullable=False, index=True)
