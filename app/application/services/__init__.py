"""Application services: template cloning, answer merging, assignment resolution."""

from app.application.services.answer_merger import merge_submission
from app.application.services.assignment_resolver import (
    build_value_lookup,
    resolve_assignments,
)
from app.application.services.template_instantiator import clone_template

__all__ = [
    "build_value_lookup",
    "clone_template",
    "merge_submission",
    "resolve_assignments",
]
