"""Infrastructure provider accessors package."""

from .ai_provider import get_summary_generator, reset_ai_services  # noqa: F401
from .auth_provider import (  # noqa: F401
    get_password_manager,
    get_token_manager,
    reset_auth_providers,
)
from .document_provider import (  # noqa: F401
    get_document_composer,
    get_text_extractor,
    reset_document_services,
)
from .repository_provider import (  # noqa: F401
    get_application_repository,
    get_candidate_repository,
    get_cv_repository,
    get_job_repository,
    get_tailored_cv_repository,
    get_user_repository,
    reset_repositories,
)
from .storage_provider import get_document_store, reset_document_store  # noqa: F401


async def reset_all_providers() -> None:
    """Drop every cached provider instance (used by tests and shutdown)."""
    await reset_ai_services()
    await reset_document_services()
    await reset_repositories()
    await reset_document_store()
    reset_auth_providers()
