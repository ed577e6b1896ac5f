"""PostgreSQL implementation of IUserRepository using UserMapper."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.entities.user import User
from app.domain.exceptions import ConflictError
from app.domain.repositories.user_repository import IUserRepository
from app.domain.value_objects import EmailAddress, UserId
from app.infrastructure.persistence.mappers.user_mapper import UserMapper
from app.infrastructure.persistence.models.auth_tables import UserTable


class PostgresUserRepository(IUserRepository):
    """PostgreSQL adapter implementation of IUserRepository."""

    def __init__(self, db_manager: SQLModelDatabaseManager):
        self._db = db_manager

    async def save(self, user: User) -> User:
        try:
            async with self._db.get_session() as session:
                existing = await session.get(UserTable, user.id.value)
                if existing is None:
                    session.add(UserMapper.to_table(user))
                else:
                    UserMapper.update_table(existing, user)
        except IntegrityError as exc:
            raise ConflictError("Email already registered") from exc
        return user

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        async with self._db.get_session() as session:
            row = await session.get(UserTable, user_id.value)
        return UserMapper.to_domain(row) if row else None

    async def get_by_email(self, email: EmailAddress) -> Optional[User]:
        async with self._db.get_session() as session:
            result = await session.execute(
                select(UserTable).where(UserTable.email == str(email))
            )
            row = result.scalars().first()
        return UserMapper.to_domain(row) if row else None


__all__ = ["PostgresUserRepository"]
