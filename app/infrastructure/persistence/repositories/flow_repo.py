"""Flow repository. Loads and stores the full flow aggregate; returns domain entities."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

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
from app.domain.enums import FieldKind
from app.domain.exceptions import FlowNotFoundException
from app.domain.value_objects.core import FilterCondition
from app.infrastructure.persistence.models.flow import (
    Criteria,
    CriteriaAnswer,
    Destination,
    Flow,
    Form,
    FormAssignment,
    Survey,
    SurveyField,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc

# Eager-load the whole owned graph; async sessions cannot lazy load.
_FULL_GRAPH = (
    selectinload(Flow.survey).selectinload(Survey.fields),
    selectinload(Flow.destination),
    selectinload(Flow.criteria).selectinload(Criteria.answers),
    selectinload(Flow.forms).selectinload(Form.assignments),
)


def _to_filter(name: str | None, value: str | None) -> FilterCondition | None:
    if not name:
        return None
    return FilterCondition(name=name, value=value or "")


def _flow_to_entity(f: Flow) -> FlowEntity:
    """Map Flow ORM (full graph loaded) to FlowEntity."""
    return FlowEntity(
        id=f.id,
        name=f.name,
        description=f.description,
        thumbnail=f.thumbnail,
        is_template=f.is_template,
        survey=SurveyEntity(
            id=f.survey.id,
            created_at=ensure_utc(f.survey.created_at),
            fields=[
                FieldEntity(
                    id=sf.id,
                    kind=FieldKind(sf.kind),
                    key=sf.key,
                    prompt=sf.prompt,
                    answer=sf.answer,
                    filter=_to_filter(sf.filter_name, sf.filter_value),
                )
                for sf in f.survey.fields
            ],
        ),
        destination=DestinationEntity(
            id=f.destination.id,
            email_addresses=list(f.destination.email_addresses or []),
            postal_code=f.destination.postal_code,
        ),
        criteria=[
            CriteriaEntity(
                id=c.id,
                prompt=c.prompt,
                category=c.category,
                answers=[
                    AnswerEntity(id=a.id, label=a.label, value=a.value)
                    for a in c.answers
                ],
                selected_value=c.selected_value,
            )
            for c in f.criteria
        ],
        forms=[
            FormEntity(
                id=fm.id,
                name=fm.name,
                file_name=fm.file_name,
                kind=fm.kind,
                assignments=[
                    AssignmentEntity(
                        id=a.id,
                        input_key=a.input_key,
                        output_field=a.output_field,
                        filter=_to_filter(a.filter_name, a.filter_value),
                    )
                    for a in fm.assignments
                ],
            )
            for fm in f.forms
        ],
    )


def _entity_to_flow(e: FlowEntity) -> Flow:
    """Map FlowEntity to a new Flow ORM graph (ids and order preserved)."""
    return Flow(
        id=e.id,
        name=e.name,
        description=e.description,
        thumbnail=e.thumbnail,
        is_template=e.is_template,
        survey=Survey(
            id=e.survey.id,
            created_at=e.survey.created_at,
            fields=[
                SurveyField(
                    id=fe.id,
                    position=i,
                    kind=fe.kind.value,
                    key=fe.key,
                    prompt=fe.prompt,
                    answer=fe.answer,
                    filter_name=fe.filter.name if fe.filter else None,
                    filter_value=fe.filter.value if fe.filter else None,
                )
                for i, fe in enumerate(e.survey.fields)
            ],
        ),
        destination=Destination(
            id=e.destination.id,
            email_addresses=list(e.destination.email_addresses),
            postal_code=e.destination.postal_code,
        ),
        criteria=[
            Criteria(
                id=ce.id,
                position=i,
                prompt=ce.prompt,
                category=ce.category,
                selected_value=ce.selected_value,
                answers=[
                    CriteriaAnswer(id=a.id, position=j, label=a.label, value=a.value)
                    for j, a in enumerate(ce.answers)
                ],
            )
            for i, ce in enumerate(e.criteria)
        ],
        forms=[
            Form(
                id=fe.id,
                position=i,
                name=fe.name,
                file_name=fe.file_name,
                kind=fe.kind,
                assignments=[
                    FormAssignment(
                        id=a.id,
                        position=j,
                        input_key=a.input_key,
                        output_field=a.output_field,
                        filter_name=a.filter.name if a.filter else None,
                        filter_value=a.filter.value if a.filter else None,
                    )
                    for j, a in enumerate(fe.assignments)
                ],
            )
            for i, fe in enumerate(e.forms)
        ],
    )


class FlowRepository(BaseRepository[Flow]):
    """Flow repository. Reads are scoped to either instances or templates."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Flow)

    async def _get_one_model(self, flow_id: str, *, template: bool) -> Flow:
        """Return the single Flow ORM (full graph) in the given set or raise FlowNotFoundException."""
        result = await self.db.execute(
            select(Flow)
            .options(*_FULL_GRAPH)
            .where(Flow.id == flow_id, Flow.is_template.is_(template))
        )
        try:
            return result.scalar_one()
        except NoResultFound as e:
            raise FlowNotFoundException(flow_id, template=template) from e
        except MultipleResultsFound as e:
            raise FlowNotFoundException(
                flow_id, template=template, reason="multiple flows matched"
            ) from e

    async def find_instance(self, flow_id: str) -> FlowEntity:
        """Return the non-template flow with this id (full graph)."""
        return _flow_to_entity(await self._get_one_model(flow_id, template=False))

    async def find_template(self, flow_id: str) -> FlowEntity:
        """Return the template flow with this id (full graph)."""
        return _flow_to_entity(await self._get_one_model(flow_id, template=True))

    async def get_by_id(self, flow_id: str) -> FlowEntity | None:
        """Return any flow (template or instance) by id, or None."""
        row = await self.get_model_by_id(flow_id, _FULL_GRAPH)
        return _flow_to_entity(row) if row else None

    async def list_instances(self) -> list[FlowEntity]:
        """Return non-template flows, most recently created survey first."""
        result = await self.db.execute(
            select(Flow)
            .join(Flow.survey)
            .options(*_FULL_GRAPH)
            .where(Flow.is_template.is_(False))
            .order_by(Survey.created_at.desc())
        )
        return [_flow_to_entity(f) for f in result.scalars().all()]

    async def list_templates(self) -> list[FlowEntity]:
        """Return all template flows."""
        result = await self.db.execute(
            select(Flow).options(*_FULL_GRAPH).where(Flow.is_template.is_(True))
        )
        return [_flow_to_entity(f) for f in result.scalars().all()]

    async def insert(self, flow: FlowEntity) -> FlowEntity:
        """Persist a new flow aggregate; return it unchanged."""
        await self.create(_entity_to_flow(flow))
        return flow

    async def save_values(self, flow: FlowEntity) -> FlowEntity:
        """Write answers, selected values and destination of an instance; return stored state.

        Structure (fields, criteria, forms) is never added or removed here.
        """
        row = await self._get_one_model(flow.id, template=False)
        answers = {f.id: f.answer for f in flow.survey.fields}
        for sf in row.survey.fields:
            if sf.id in answers:
                sf.answer = answers[sf.id]
        selections = {c.id: c.selected_value for c in flow.criteria}
        for c in row.criteria:
            if c.id in selections:
                c.selected_value = selections[c.id]
        row.destination.email_addresses = list(flow.destination.email_addresses)
        row.destination.postal_code = flow.destination.postal_code
        await self.db.flush()
        return _flow_to_entity(row)

    async def delete_flow(self, flow_id: str) -> None:
        """Delete a non-template flow and everything it owns."""
        row = await self._get_one_model(flow_id, template=False)
        await self.delete(row)
