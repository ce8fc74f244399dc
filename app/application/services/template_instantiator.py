"""Template cloning: build an independent flow instance from a template.

The clone is a deep copy with a fresh id on every owned entity. Keys,
categories, prompts, filters and output field codes are copied verbatim;
user data (answers, selected values, destination) starts empty. The source
template is never modified.
"""

from app.domain.entities.flow import (
    AnswerEntity,
    AssignmentEntity,
    CriteriaEntity,
    DestinationEntity,
    FieldEntity,
    FlowEntity,
    FormEntity,
    SurveyEntity,
)
from app.domain.exceptions import InvalidTemplateException
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


def _clone_field(f: FieldEntity) -> FieldEntity:
    return FieldEntity(
        id=generate_cuid(),
        kind=f.kind,
        key=f.key,
        prompt=f.prompt,
        answer="",
        filter=f.filter,
    )


def _clone_criteria(c: CriteriaEntity) -> CriteriaEntity:
    return CriteriaEntity(
        id=generate_cuid(),
        prompt=c.prompt,
        category=c.category,
        answers=[
            AnswerEntity(id=generate_cuid(), label=a.label, value=a.value)
            for a in c.answers
        ],
        selected_value=None,
    )


def _clone_form(form: FormEntity) -> FormEntity:
    return FormEntity(
        id=generate_cuid(),
        name=form.name,
        file_name=form.file_name,
        kind=form.kind,
        assignments=[
            AssignmentEntity(
                id=generate_cuid(),
                input_key=a.input_key,
                output_field=a.output_field,
                filter=a.filter,
            )
            for a in form.assignments
        ],
    )


def clone_template(template: FlowEntity) -> FlowEntity:
    """Return a new, unsaved flow instance copied from template.

    Args:
        template: Source flow; must be flagged as a template.

    Returns:
        FlowEntity with is_template False and fresh ids throughout.

    Raises:
        InvalidTemplateException: If template.is_template is False.
    """
    if not template.is_template:
        raise InvalidTemplateException(template.id)
    return FlowEntity(
        id=generate_cuid(),
        name=template.name,
        description=template.description,
        thumbnail=template.thumbnail,
        is_template=False,
        survey=SurveyEntity(
            id=generate_cuid(),
            created_at=utc_now(),
            fields=[_clone_field(f) for f in template.survey.fields],
        ),
        destination=DestinationEntity(id=generate_cuid()),
        criteria=[_clone_criteria(c) for c in template.criteria],
        forms=[_clone_form(f) for f in template.forms],
    )
