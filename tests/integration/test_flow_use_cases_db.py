"""Flow use cases end to end against in-memory SQLite and a temporary asset root."""

import pytest

from app.application.dtos.flow import CriteriaSelection, FieldAnswer, FlowSubmission
from app.application.use_cases.flows import (
    DeleteFlowUseCase,
    InstantiateTemplateUseCase,
    ResolveFlowAssignmentsUseCase,
    SubmitFlowAnswersUseCase,
)
from app.domain.exceptions import AssetProvisioningException, FlowNotFoundException
from app.infrastructure.persistence.repositories.flow_repo import FlowRepository
from app.infrastructure.services.template_seed_service import (
    TAXES_TEMPLATE_ID,
    TemplateSeedService,
)


class FailingProvisioner:
    async def provision(self, source_flow_id: str, target_flow_id: str) -> None:
        raise AssetProvisioningException(source_flow_id, target_flow_id, "disk full")


async def _seed(session_factory) -> None:
    async with session_factory() as session, session.begin():
        await TemplateSeedService(FlowRepository(session)).seed_missing()


@pytest.mark.requires_db
async def test_taxes_instantiate_submit_resolve(session_factory, asset_provisioner, storage_root) -> None:
    await _seed(session_factory)
    template_assets = storage_root / "templates" / TAXES_TEMPLATE_ID
    template_assets.mkdir(parents=True)
    (template_assets / "f1098c.pdf").write_bytes(b"%PDF-1.4 sample")

    async with session_factory() as session, session.begin():
        flow = await InstantiateTemplateUseCase(
            FlowRepository(session), asset_provisioner
        ).execute(TAXES_TEMPLATE_ID)
    assert (storage_root / "flows" / flow.id / "f1098c.pdf").read_bytes() == b"%PDF-1.4 sample"

    by_key = {f.key: f.id for f in flow.survey.fields}
    submission = FlowSubmission(
        id=flow.id,
        fields=[
            FieldAnswer(id=by_key["firstname"], answer="Jane"),
            FieldAnswer(id=by_key["barter"], answer="150"),
        ],
        criteria=[CriteriaSelection(category="6a", selected_value="yes")],
    )
    async with session_factory() as session, session.begin():
        stored = await SubmitFlowAnswersUseCase(FlowRepository(session)).execute(submission)
    assert {f.key: f.answer for f in stored.survey.fields}["firstname"] == "Jane"

    async with session_factory() as session:
        resolved = await ResolveFlowAssignmentsUseCase(FlowRepository(session)).execute(flow.id)
    triples = {(r.form_name, r.output_field, r.value) for r in resolved}
    assert ("f1098c", "topmostSubform[0].CopyA[0].TopLeftColumn[0].f1_1[0]", "Jane") in triples
    assert ("f1098c", "topmostSubform[0].CopyA[0].f1_16[0]", "150") in triples

    async with session_factory() as session, session.begin():
        await DeleteFlowUseCase(FlowRepository(session)).execute(flow.id)
    async with session_factory() as session:
        assert await FlowRepository(session).list_instances() == []
        assert len(await FlowRepository(session).list_templates()) == 3


@pytest.mark.requires_db
async def test_provisioning_failure_rolls_back_insert(session_factory) -> None:
    await _seed(session_factory)

    async with session_factory() as session:
        with pytest.raises(AssetProvisioningException):
            async with session.begin():
                await InstantiateTemplateUseCase(
                    FlowRepository(session), FailingProvisioner()
                ).execute(TAXES_TEMPLATE_ID)

    async with session_factory() as session:
        assert await FlowRepository(session).list_instances() == []


@pytest.mark.requires_db
async def test_submit_to_template_id_not_found(session_factory) -> None:
    await _seed(session_factory)
    async with session_factory() as session:
        with pytest.raises(FlowNotFoundException):
            await SubmitFlowAnswersUseCase(FlowRepository(session)).execute(
                FlowSubmission(id=TAXES_TEMPLATE_ID)
            )


@pytest.mark.requires_db
async def test_seed_is_idempotent(session_factory) -> None:
    async with session_factory() as session, session.begin():
        first = await TemplateSeedService(FlowRepository(session)).seed_missing()
    async with session_factory() as session, session.begin():
        second = await TemplateSeedService(FlowRepository(session)).seed_missing()
    assert len(first) == 3
    assert second == []
    async with session_factory() as session:
        assert len(await FlowRepository(session).list_templates()) == 3
