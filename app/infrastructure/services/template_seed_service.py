"""Sample template seeding (fills missing sample templates by fixed id)."""

from __future__ import annotations

import logging
from typing import TypedDict

from app.application.interfaces.repositories import IFlowRepository
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
from app.domain.value_objects.core import FilterCondition
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)

HELP_DESK_TEMPLATE_ID = "5710c736-f5b9-475f-9ef5-76529ea11111"
HIRE_TEMPLATE_ID = "5710c736-f5b9-475f-9ef5-76529ea22222"
TAXES_TEMPLATE_ID = "5710c736-f5b9-475f-9ef5-76529ea05fb0"

YES_NO_UNKNOWN: list[tuple[str, str]] = [
    ("Yes", "yes"),
    ("No", "no"),
    ("Unknown", "unknown"),
]
YES_NO: list[tuple[str, str]] = [("Yes", "yes"), ("No", "no")]
YES_ONLY: list[tuple[str, str]] = [("Yes", "yes")]

# (key, prompt, filter) per field; filter is (name, value) or None.
FieldData = tuple[str, str, tuple[str, str] | None]
# (input_key, output_field, filter)
AssignmentData = tuple[str, str, tuple[str, str] | None]


class CriteriaData(TypedDict):
    """Single-select question configuration."""

    category: str
    prompt: str
    answers: list[tuple[str, str]]


class FormData(TypedDict):
    """Output document configuration."""

    name: str
    file_name: str
    kind: str
    assignments: list[AssignmentData]


class TemplateData(TypedDict):
    """Sample template configuration."""

    id: str
    name: str
    description: str
    thumbnail: str
    fields: list[FieldData]
    criteria: list[CriteriaData]
    forms: list[FormData]


_F1098C = "topmostSubform[0].CopyA[0]"
_F1040EZ = "topmostSubform[0].Page1[0].Entity[0]"

SAMPLE_TEMPLATES: list[TemplateData] = [
    {
        "id": HELP_DESK_TEMPLATE_ID,
        "name": "Help Desk Questionaire",
        "description": "Demo of the helpdesk questionaire",
        "thumbnail": "placeholder.jpg",
        "fields": [
            ("firstname", "Please enter your first name", None),
            ("lastname", "Please enter your last name", None),
            ("jobtitle", "Please enter your job title", None),
        ],
        "criteria": [
            {"category": "card", "prompt": "Credit Card?", "answers": YES_NO_UNKNOWN},
            {
                "category": "less700k",
                "prompt": "Purchase less than $700,000?",
                "answers": YES_NO_UNKNOWN,
            },
            {
                "category": "gr100",
                "prompt": "Purchase between $700,000 and $13.5 Million?",
                "answers": YES_NO_UNKNOWN,
            },
        ],
        "forms": [
            {
                "name": "NESD_Questionnaire",
                "file_name": "NESD_Questionnaire.doc",
                "kind": "doc",
                "assignments": [],
            }
        ],
    },
    {
        "id": HIRE_TEMPLATE_ID,
        "name": "Hire",
        "description": "Hire people!",
        "thumbnail": "placeholder.jpg",
        "fields": [
            ("firstname", "Please enter employee first name", None),
            ("lastname", "Please enter employee last name", None),
        ],
        "criteria": [],
        "forms": [],
    },
    {
        "id": TAXES_TEMPLATE_ID,
        "name": "Taxes",
        "description": "File your taxes.",
        "thumbnail": "placeholder.jpg",
        "fields": [
            ("firstname", "Please enter Donee's first name", None),
            ("lastname", "Please enter Donee's last name", None),
            ("street", "Please enter street address", None),
            ("address", "Enter City, State, and Country", None),
            ("zip", "Enter Zip Code", None),
            ("phone", "Enter Telphone number", None),
            ("tin1", "Donee's TIN ", None),
            ("filerTin", "Filer's TIN ", None),
            ("filerFirstName", "Filer's first name", None),
            ("filerLastName", "Filer's last name", None),
            ("filerAddress1", "Street address", None),
            ("filerAddress2", "City/town, State, Zip Code, Country", None),
            ("date", "Date of contribution", None),
            ("miles", "Odometer mileage", None),
            ("year", "Year", None),
            ("make", "Make", None),
            ("model", "Model", None),
            ("vin", "Vehicle or other Identification number ", None),
            ("saleDate", "Date of Sale", None),
            ("amount", "Gross proceeds from sale", None),
            (
                "barter",
                "Value of goods and services provided in exchange for the vehicle",
                ("6a", "yes"),
            ),
            (
                "goodsDescription",
                "Describe the goods and services, if any, that were provided.",
                ("6a", "yes"),
            ),
        ],
        "criteria": [
            {
                "category": "6a",
                "prompt": "Did you provide goods or services in exchange for the vehicle?",
                "answers": YES_NO,
            },
            {
                "category": "Vehicle Transaction",
                "prompt": (
                    "Donee certifies that vehicle was sold in arm's length "
                    "transaction to unrelated party"
                ),
                "answers": YES_NO,
            },
            {
                "category": "Transfer Information",
                "prompt": (
                    "Donee certifies that vehicle will not be transferred for money, "
                    "other property, or services before completion of material "
                    "improvements or significant intervening use"
                ),
                "answers": YES_NO,
            },
            {
                "category": "Relocation of Vehicle",
                "prompt": (
                    "Donee certifies that vehicle is to be transferred to a needy "
                    "individual for significantly below fair market value in "
                    "furtherance of donee’s charitable purpose"
                ),
                "answers": YES_NO,
            },
            {
                "category": "User Agreement",
                "prompt": (
                    "Donee certifies the following detailed description of material "
                    "improvements or significant intervening use and duration of use"
                ),
                "answers": YES_NO,
            },
            {
                "category": "Charitable Contributions",
                "prompt": (
                    "Describe the goods and services, if any, that were provided. "
                    "If this box is checked, donee certifies that the goods and "
                    "services consisted solely of intangible religious benefits."
                ),
                "answers": YES_ONLY,
            },
            {
                "category": "Contributions of Motor Vehicles, Boats and Airplanes",
                "prompt": (
                    "Under the law, the donor may not claim a deduction of more "
                    "than $500 for this vehicle if this box is checked"
                ),
                "answers": YES_ONLY,
            },
        ],
        "forms": [
            {
                "name": "f1098c",
                "file_name": "f1098c.pdf",
                "kind": "pdf",
                "assignments": [
                    ("firstname", f"{_F1098C}.TopLeftColumn[0].f1_1[0]", None),
                    ("tin1", f"{_F1098C}.TopLeftColumn[0].f1_2[0]", None),
                    ("filerTin", f"{_F1098C}.TopLeftColumn[0].f1_3[0]", None),
                    ("filerFirstName", f"{_F1098C}.TopLeftColumn[0].f1_4[0]", None),
                    ("filerAddress1", f"{_F1098C}.TopLeftColumn[0].f1_5[0]", None),
                    ("filerAddress2", f"{_F1098C}.TopLeftColumn[0].f1_7[0]", None),
                    # checkbox driven directly by the criteria value
                    ("6a", f"{_F1098C}.c1_5[0]", None),
                    ("barter", f"{_F1098C}.f1_16[0]", ("6a", "yes")),
                    ("goodsDescription", f"{_F1098C}.f1_17[0]", ("6a", "yes")),
                ],
            },
            {
                "name": "f1040ez",
                "file_name": "f1040ez.pdf",
                "kind": "pdf",
                "assignments": [
                    ("filerFirstName", f"{_F1040EZ}.f1_1[0]", None),
                    ("filerLastName", f"{_F1040EZ}.f1_2[0]", None),
                    ("filerAddress1", f"{_F1040EZ}.f1_6[0]", None),
                    ("filerAddress2", f"{_F1040EZ}.f1_8[0]", None),
                ],
            },
        ],
    },
]


def _filter(data: tuple[str, str] | None) -> FilterCondition | None:
    return FilterCondition(name=data[0], value=data[1]) if data else None


def build_template(data: TemplateData) -> FlowEntity:
    """Build a template FlowEntity from its configuration (fresh ids below the flow)."""
    return FlowEntity(
        id=data["id"],
        name=data["name"],
        description=data["description"],
        thumbnail=data["thumbnail"],
        is_template=True,
        survey=SurveyEntity(
            id=generate_cuid(),
            created_at=utc_now(),
            fields=[
                FieldEntity(
                    id=generate_cuid(),
                    kind=FieldKind.STRING,
                    key=key,
                    prompt=prompt,
                    filter=_filter(flt),
                )
                for key, prompt, flt in data["fields"]
            ],
        ),
        destination=DestinationEntity(id=generate_cuid()),
        criteria=[
            CriteriaEntity(
                id=generate_cuid(),
                prompt=c["prompt"],
                category=c["category"],
                answers=[
                    AnswerEntity(id=generate_cuid(), label=label, value=value)
                    for label, value in c["answers"]
                ],
            )
            for c in data["criteria"]
        ],
        forms=[
            FormEntity(
                id=generate_cuid(),
                name=f["name"],
                file_name=f["file_name"],
                kind=f["kind"],
                assignments=[
                    AssignmentEntity(
                        id=generate_cuid(),
                        input_key=input_key,
                        output_field=output_field,
                        filter=_filter(flt),
                    )
                    for input_key, output_field, flt in f["assignments"]
                ],
            )
            for f in data["forms"]
        ],
    )


def sample_templates() -> list[FlowEntity]:
    """Return freshly built entities for every sample template."""
    return [build_template(data) for data in SAMPLE_TEMPLATES]


class TemplateSeedService:
    """Inserts sample templates whose id is not stored yet. Existing rows are never touched."""

    def __init__(self, flow_repo: IFlowRepository) -> None:
        self._flow_repo = flow_repo

    async def seed_missing(self) -> list[FlowEntity]:
        """Insert missing sample templates; return the ones inserted."""
        inserted: list[FlowEntity] = []
        for template in sample_templates():
            if await self._flow_repo.get_by_id(template.id) is not None:
                logger.info("Template %s (%s) already present", template.name, template.id)
                continue
            await self._flow_repo.insert(template)
            inserted.append(template)
            logger.info("Seeded template %s (%s)", template.name, template.id)
        return inserted
