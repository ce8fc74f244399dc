"""Merge a user submission into a stored flow instance.

Full-replacement semantics: the submission is expected to carry the
complete current answer set. A stored field or criteria absent from the
submission is cleared, not left unchanged. Only leaf values change; the
owned structure (ids, keys, prompts, filters, forms) is fixed at
instantiation.
"""

from app.application.dtos.flow import FlowSubmission
from app.domain.entities.flow import FlowEntity


def merge_submission(existing: FlowEntity, submission: FlowSubmission) -> FlowEntity:
    """Apply submission values onto existing and return it.

    Fields match by id, criteria by category. Submitted entries that match
    nothing are ignored; when an id or category repeats, the first one wins.

    Args:
        existing: Stored flow instance (full graph); mutated in place.
        submission: Submitted answers, selections and optional destination.

    Returns:
        The same FlowEntity, now holding the merged values.
    """
    answers: dict[str, str] = {}
    for fa in submission.fields:
        answers.setdefault(fa.id, fa.answer)
    for f in existing.survey.fields:
        f.answer = answers.get(f.id, "")

    selections: dict[str, str | None] = {}
    for cs in submission.criteria:
        selections.setdefault(cs.category, cs.selected_value)
    for c in existing.criteria:
        c.selected_value = selections.get(c.category)

    if submission.destination is not None:
        existing.destination.email_addresses = list(
            submission.destination.email_addresses
        )
        existing.destination.postal_code = submission.destination.postal_code
    return existing
