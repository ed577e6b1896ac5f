"""Application layer entry points.

Holds orchestrators and use-case services that coordinate domain logic with adapters.

Note: Services are imported directly from their modules to avoid circular imports.
Use:
    from app.application.tailoring_service import TailoredCVApplicationService
    from app.application.cv_service import CVApplicationService, UploadedFile
"""

# Services are NOT imported here to avoid circular dependencies with API layer
# Import directly from submodules when needed

__all__: list = []
