"""Flow aggregate ORM models.

Flow owns one Survey (ordered SurveyFields), one Destination, ordered
Criteria (ordered CriteriaAnswers) and ordered Forms (ordered
FormAssignments). Every child is deleted with its parent. Child order is
stored in a position column; filters are embedded as (filter_name,
filter_value) column pairs.
"""

from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Flow(CuidMixin, TimestampMixin, Base):
    """Flow: template or user instance. Table: flow."""

    __tablename__ = "flow"

    name: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_template: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=sa.false(), index=True
    )

    survey: Mapped["Survey"] = relationship(
        back_populates="flow", cascade="all, delete-orphan", uselist=False
    )
    destination: Mapped["Destination"] = relationship(
        back_populates="flow", cascade="all, delete-orphan", uselist=False
    )
    criteria: Mapped[list["Criteria"]] = relationship(
        back_populates="flow",
        cascade="all, delete-orphan",
        order_by="Criteria.position",
    )
    forms: Mapped[list["Form"]] = relationship(
        back_populates="flow",
        cascade="all, delete-orphan",
        order_by="Form.position",
    )


class Survey(CuidMixin, Base):
    """Survey owned by exactly one flow. Table: survey."""

    __tablename__ = "survey"

    flow_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("flow.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )

    flow: Mapped[Flow] = relationship(back_populates="survey")
    fields: Mapped[list["SurveyField"]] = relationship(
        back_populates="survey",
        cascade="all, delete-orphan",
        order_by="SurveyField.position",
    )


class SurveyField(CuidMixin, Base):
    """One answer slot in a survey. Table: survey_field."""

    __tablename__ = "survey_field"

    survey_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("survey.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    kind: Mapped[str] = mapped_column(String(50), nullable=False)
    key: Mapped[str] = mapped_column(String(200), nullable=False)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False, default="")
    filter_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    filter_value: Mapped[str | None] = mapped_column(String(500), nullable=True)

    survey: Mapped[Survey] = relationship(back_populates="fields")

    __table_args__ = (
        Index("ix_survey_field_survey_id", "survey_id"),
        UniqueConstraint("survey_id", "key", name="uq_survey_field_survey_key"),
    )


class Criteria(CuidMixin, Base):
    """Single-select question owned by a flow. Table: criteria."""

    __tablename__ = "criteria"

    flow_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("flow.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(200), nullable=False)
    selected_value: Mapped[str | None] = mapped_column(String(500), nullable=True)

    flow: Mapped[Flow] = relationship(back_populates="criteria")
    answers: Mapped[list["CriteriaAnswer"]] = relationship(
        back_populates="criteria",
        cascade="all, delete-orphan",
        order_by="CriteriaAnswer.position",
    )

    __table_args__ = (
        Index("ix_criteria_flow_id", "flow_id"),
        UniqueConstraint("flow_id", "category", name="uq_criteria_flow_category"),
    )


class CriteriaAnswer(CuidMixin, Base):
    """Label/value choice for a criteria. Table: criteria_answer."""

    __tablename__ = "criteria_answer"

    criteria_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("criteria.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    label: Mapped[str] = mapped_column(String(500), nullable=False)
    value: Mapped[str] = mapped_column(String(500), nullable=False)

    criteria: Mapped[Criteria] = relationship(back_populates="answers")


class Destination(CuidMixin, Base):
    """Delivery metadata, one per flow. Table: destination."""

    __tablename__ = "destination"

    flow_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("flow.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    email_addresses: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False, default="")

    flow: Mapped[Flow] = relationship(back_populates="destination")


class Form(CuidMixin, Base):
    """Output document definition owned by a flow. Table: form."""

    __tablename__ = "form"

    flow_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("flow.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    file_name: Mapped[str] = mapped_column(String(500), nullable=False)
    kind: Mapped[str] = mapped_column(String(50), nullable=False)

    flow: Mapped[Flow] = relationship(back_populates="forms")
    assignments: Mapped[list["FormAssignment"]] = relationship(
        back_populates="form",
        cascade="all, delete-orphan",
        order_by="FormAssignment.position",
    )


class FormAssignment(CuidMixin, Base):
    """Input key to output field code mapping. Table: form_assignment."""

    __tablename__ = "form_assignment"

    form_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("form.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    input_key: Mapped[str] = mapped_column(String(200), nullable=False)
    output_field: Mapped[str] = mapped_column(String(500), nullable=False)
    filter_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    filter_value: Mapped[str | None] = mapped_column(String(500), nullable=True)

    form: Mapped[Form] = relationship(back_populates="assignments")
