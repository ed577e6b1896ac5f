"""Mapper between User domain entities and UserTable persistence models."""

from __future__ import annotations

from app.domain.entities.user import User, UserRole
from app.domain.value_objects import EmailAddress, UserId
from app.infrastructure.persistence.models.auth_tables import UserTable


class UserMapper:
    """Maps between User domain entities and UserTable persistence models."""

    @staticmethod
    def to_domain(table: UserTable) -> User:
        try:
            role = UserRole(table.role)
        except ValueError:
            role = UserRole.USER
        return User(
            id=UserId(table.id),
            email=EmailAddress(table.email),
            password_hash=table.hashed_password,
            role=role,
            name=table.name,
            created_at=table.created_at,
            last_login_at=table.last_login_at,
        )

    @staticmethod
    def to_table(entity: User) -> UserTable:
        return UserTable(
            id=entity.id.value,
            email=str(entity.email),
            hashed_password=entity.password_hash,
            name=entity.name,
            role=entity.role.value,
            created_at=entity.created_at,
            last_login_at=entity.last_login_at,
        )

    @staticmethod
    def update_table(table: UserTable, entity: User) -> None:
        table.email = str(entity.email)
        table.hashed_password = entity.password_hash
        table.name = entity.name
        table.role = entity.role.value
        table.last_login_at = entity.last_login_at


__all__ = ["UserMapper"]
