"""Resolve form assignments against a flow's current answers.

Pure function of the flow graph: no I/O and no domain errors. References to
keys that do not exist degrade to suppression (filters) or an empty value
(assignments) so a partially configured template never breaks resolution.
"""

from app.application.dtos.flow import ResolvedAssignment
from app.domain.entities.flow import FlowEntity


def build_value_lookup(flow: FlowEntity) -> dict[str, str | None]:
    """Map every criteria category and field key to its current value.

    Criteria map to their selected value (None when unanswered), fields to
    their answer. On a key/category collision the field wins.
    """
    values: dict[str, str | None] = {c.category: c.selected_value for c in flow.criteria}
    for f in flow.survey.fields:
        values[f.key] = f.answer
    return values


def resolve_assignments(flow: FlowEntity) -> list[ResolvedAssignment]:
    """Return resolved assignments for every form, in declared order.

    An assignment whose filter does not hold is omitted. An emitted
    assignment whose input key is unknown or unanswered gets "". Duplicate
    output fields within a form are all emitted; consumers apply them in
    order so the last one wins.
    """
    values = build_value_lookup(flow)
    resolved: list[ResolvedAssignment] = []
    for form in flow.forms:
        for assignment in form.assignments:
            if assignment.filter is not None and not assignment.filter.is_satisfied_by(values):
                continue
            resolved.append(
                ResolvedAssignment(
                    form_name=form.name,
                    output_field=assignment.output_field,
                    value=values.get(assignment.input_key) or "",
                )
            )
    return resolved
