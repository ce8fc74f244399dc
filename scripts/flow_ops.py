"""Operate on flows from the command line. Output is JSON on stdout.

Usage:
    python -m scripts.flow_ops templates
    python -m scripts.flow_ops list
    python -m scripts.flow_ops show <flow_id>
    python -m scripts.flow_ops instantiate <template_id>
    python -m scripts.flow_ops submit <submission.json>
    python -m scripts.flow_ops resolve <flow_id>
    python -m scripts.flow_ops delete <flow_id>

The submission file holds a FlowSubmissionRequest document:
    {"id": "...", "fields": [{"id": "...", "answer": "..."}],
     "criteria": [{"category": "6a", "selected_value": "yes"}],
     "destination": {"email_addresses": ["a@b.c"], "postal_code": "12345"}}
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from app.application.use_cases.flows import (
    DeleteFlowUseCase,
    InstantiateTemplateUseCase,
    ResolveFlowAssignmentsUseCase,
    SubmitFlowAnswersUseCase,
)
from app.core.logging import setup_logging
from app.domain.entities.flow import FlowEntity
from app.domain.exceptions import FlowFillException
from app.infrastructure.external.storage import StorageFactory
from app.infrastructure.persistence.database import (
    create_schema,
    dispose_engine,
    session_scope,
    transactional_scope,
)
from app.infrastructure.persistence.repositories.flow_repo import FlowRepository
from app.schemas.flow import (
    FlowResponse,
    FlowSubmissionRequest,
    FlowSummaryResponse,
    ResolvedAssignmentResponse,
)

USAGE = (
    "Usage: python -m scripts.flow_ops "
    "{templates|list|show <flow_id>|instantiate <template_id>|"
    "submit <submission.json>|resolve <flow_id>|delete <flow_id>}"
)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _summary(flow: FlowEntity) -> dict[str, Any]:
    return FlowSummaryResponse(
        id=flow.id,
        name=flow.name,
        description=flow.description,
        thumbnail=flow.thumbnail,
        is_template=flow.is_template,
        created_at=flow.survey.created_at,
    ).model_dump(mode="json")


def _detail(flow: FlowEntity) -> dict[str, Any]:
    return FlowResponse.model_validate(flow).model_dump(mode="json")


async def _dispatch(command: str, args: list[str]) -> Any:
    if command == "templates":
        async with session_scope() as session:
            return [_summary(t) for t in await FlowRepository(session).list_templates()]
    if command == "list":
        async with session_scope() as session:
            return [_summary(f) for f in await FlowRepository(session).list_instances()]
    if command == "show":
        async with session_scope() as session:
            flow = await FlowRepository(session).get_by_id(args[0])
        return _detail(flow) if flow else None
    if command == "instantiate":
        async with transactional_scope() as session:
            use_case = InstantiateTemplateUseCase(
                FlowRepository(session), StorageFactory.create_asset_provisioner()
            )
            return _detail(await use_case.execute(args[0]))
    if command == "submit":
        raw = Path(args[0]).read_text(encoding="utf-8")
        request = FlowSubmissionRequest.model_validate_json(raw)
        async with transactional_scope() as session:
            use_case = SubmitFlowAnswersUseCase(FlowRepository(session))
            return _detail(await use_case.execute(request.to_submission()))
    if command == "resolve":
        async with session_scope() as session:
            resolved = await ResolveFlowAssignmentsUseCase(
                FlowRepository(session)
            ).execute(args[0])
        return [
            ResolvedAssignmentResponse.model_validate(r).model_dump(mode="json")
            for r in resolved
        ]
    if command == "delete":
        async with transactional_scope() as session:
            await DeleteFlowUseCase(FlowRepository(session)).execute(args[0])
        return {"deleted": args[0]}
    raise ValueError(f"Unknown command: {command}")


async def run(command: str, args: list[str]) -> Any:
    await create_schema()
    try:
        return await _dispatch(command, args)
    finally:
        await dispose_engine()


def main() -> None:
    if len(sys.argv) < 2:
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    command, args = sys.argv[1], sys.argv[2:]
    if command not in ("templates", "list") and len(args) != 1:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    _load_env()
    setup_logging(sys.stderr)
    try:
        result = asyncio.run(run(command, args))
    except FlowFillException as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
