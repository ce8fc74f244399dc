"""Tests for flow entities, FieldKind and FilterCondition."""

from datetime import UTC, datetime

import pytest

from app.domain.entities.flow import (
    CriteriaEntity,
    DestinationEntity,
    FieldEntity,
    FlowEntity,
    SurveyEntity,
)
from app.domain.enums import FieldKind
from app.domain.exceptions import ValidationException
from app.domain.value_objects.core import FilterCondition


def _field(field_id: str, key: str, answer: str = "") -> FieldEntity:
    return FieldEntity(id=field_id, kind=FieldKind.STRING, key=key, prompt=key, answer=answer)


def _survey(*fields: FieldEntity) -> SurveyEntity:
    return SurveyEntity(id="s1", created_at=datetime(2025, 1, 1, tzinfo=UTC), fields=list(fields))


class TestFieldKind:
    def test_values(self) -> None:
        assert FieldKind.values() == ["string"]

    def test_from_value(self) -> None:
        assert FieldKind("string") is FieldKind.STRING


class TestFilterCondition:
    def test_satisfied_on_exact_match(self) -> None:
        assert FilterCondition("6a", "yes").is_satisfied_by({"6a": "yes"})

    def test_case_sensitive(self) -> None:
        assert not FilterCondition("6a", "yes").is_satisfied_by({"6a": "Yes"})

    def test_missing_key_never_matches(self) -> None:
        assert not FilterCondition("6a", "yes").is_satisfied_by({})

    def test_none_value_never_matches(self) -> None:
        assert not FilterCondition("6a", "").is_satisfied_by({"6a": None})

    def test_empty_required_value_matches_empty_answer(self) -> None:
        assert FilterCondition("name", "").is_satisfied_by({"name": ""})

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            FilterCondition("", "yes")

    def test_immutable(self) -> None:
        cond = FilterCondition("6a", "yes")
        with pytest.raises(AttributeError):
            cond.value = "no"  # type: ignore[misc]


class TestSurveyEntity:
    def test_duplicate_keys_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Duplicate field key"):
            _survey(_field("f1", "name"), _field("f2", "name"))

    def test_field_by_id(self) -> None:
        survey = _survey(_field("f1", "first"), _field("f2", "last"))
        assert survey.field_by_id("f2").key == "last"
        assert survey.field_by_id("missing") is None


class TestFlowEntity:
    def test_duplicate_categories_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Duplicate criteria category"):
            FlowEntity(
                id="flow1",
                name="n",
                description=None,
                thumbnail=None,
                is_template=True,
                survey=_survey(),
                destination=DestinationEntity(id="d1"),
                criteria=[
                    CriteriaEntity(id="c1", prompt="p", category="6a"),
                    CriteriaEntity(id="c2", prompt="p", category="6a"),
                ],
            )

    def test_criteria_by_category(self, taxes_template) -> None:
        criteria = taxes_template.criteria_by_category("6a")
        assert criteria is not None
        assert [a.value for a in criteria.answers] == ["yes", "no"]
        assert taxes_template.criteria_by_category("nope") is None

    def test_destination_defaults_empty(self) -> None:
        dest = DestinationEntity(id="d1")
        assert dest.email_addresses == []
        assert dest.postal_code == ""
