"""Tests for domain/table mappers."""

from uuid import uuid4

from app.domain.entities.job import Job
from app.domain.entities.tailored_cv import TailoredCV
from app.domain.entities.user import User, UserRole
from app.domain.utils import utc_now
from app.domain.value_objects import CVId, JobId, Summary, UserId
from app.infrastructure.persistence.mappers.job_mapper import JobMapper
from app.infrastructure.persistence.mappers.tailored_cv_mapper import TailoredCVMapper
from app.infrastructure.persistence.mappers.user_mapper import UserMapper
from app.infrastructure.persistence.models.auth_tables import UserTable
from app.infrastructure.persistence.models.tailored_cv_table import TailoredCVTable


class TestTailoredCVMapper:
    def test_insert_values_use_raw_uuids(self):
        entity = TailoredCV.create(
            UserId(uuid4()),
            CVId(uuid4()),
            JobId(uuid4()),
            file_url="local://tailored/x.pdf",
            summary=Summary("Summary", True),
        )

        values = TailoredCVMapper.to_insert_values(entity)

        assert values["id"] == entity.id.value
        assert values["user_id"] == entity.user_id.value
        assert values["ai_generated"] is True
        assert values["regenerated_at"] is None

    def test_to_domain_attaches_job_title(self):
        now = utc_now()
        table = TailoredCVTable(
            id=uuid4(),
            user_id=uuid4(),
            cv_id=uuid4(),
            job_id=uuid4(),
            file_url="local://tailored/x.pdf",
            ai_summary="Professional summary not generated.",
            ai_generated=False,
            created_at=now,
            regenerated_at=now,
        )

        entity = TailoredCVMapper.to_domain(table, job_title="Designer")

        assert entity.id.value == table.id
        assert entity.job_title == "Designer"
        assert entity.ai_generated is False
        assert entity.regenerated_at == now


class TestJobMapper:
    def test_round_trip_keeps_fields(self):
        job = Job.create("QA Engineer", company="Acme", location="Remote", type="contract")

        restored = JobMapper.to_domain(JobMapper.to_table(job))

        assert restored == job


class TestUserMapper:
    def test_unknown_role_defaults_to_user(self):
        user = User.register("jane@example.com", "hash", role=UserRole.ADMIN)
        table: UserTable = UserMapper.to_table(user)
        table.role = "superuser"

        restored = UserMapper.to_domain(table)

        assert restored.role == UserRole.USER
        assert restored.email == user.email
        assert restored.password_hash == "hash"
