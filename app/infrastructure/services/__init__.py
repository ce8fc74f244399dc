"""Infrastructure services (bootstrap routines)."""

from app.infrastructure.services.template_seed_service import (
    TemplateSeedService,
    sample_templates,
)

__all__ = ["TemplateSeedService", "sample_templates"]
