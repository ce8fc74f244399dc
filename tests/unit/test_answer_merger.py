"""Unit tests for merge_submission (full-replacement merge)."""

from app.application.dtos.flow import (
    CriteriaSelection,
    DestinationUpdate,
    FieldAnswer,
    FlowSubmission,
)
from app.application.services.answer_merger import merge_submission
from app.application.services.template_instantiator import clone_template


def _field_id(flow, key: str) -> str:
    return next(f.id for f in flow.survey.fields if f.key == key)


def _answers(flow) -> dict[str, str]:
    return {f.key: f.answer for f in flow.survey.fields}


class TestMergeSubmission:
    def test_copies_answers_by_id(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        submission = FlowSubmission(
            id=flow.id,
            fields=[FieldAnswer(id=_field_id(flow, "firstname"), answer="Jane")],
        )
        merged = merge_submission(flow, submission)
        assert merged is flow
        assert _answers(merged)["firstname"] == "Jane"

    def test_omitted_field_is_cleared(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        merge_submission(
            flow,
            FlowSubmission(
                id=flow.id,
                fields=[
                    FieldAnswer(id=_field_id(flow, "firstname"), answer="Jane"),
                    FieldAnswer(id=_field_id(flow, "lastname"), answer="Doe"),
                ],
            ),
        )
        merge_submission(
            flow,
            FlowSubmission(
                id=flow.id,
                fields=[FieldAnswer(id=_field_id(flow, "lastname"), answer="Doe")],
            ),
        )
        answers = _answers(flow)
        assert answers["firstname"] == ""
        assert answers["lastname"] == "Doe"

    def test_empty_answer_copied_verbatim(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        flow.survey.fields[0].answer = "old"
        merge_submission(
            flow,
            FlowSubmission(id=flow.id, fields=[FieldAnswer(id=flow.survey.fields[0].id, answer="")]),
        )
        assert flow.survey.fields[0].answer == ""

    def test_criteria_matched_by_category(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        merge_submission(
            flow,
            FlowSubmission(id=flow.id, criteria=[CriteriaSelection(category="6a", selected_value="yes")]),
        )
        assert flow.criteria_by_category("6a").selected_value == "yes"
        assert flow.criteria_by_category("Vehicle Transaction").selected_value is None

    def test_omitted_criteria_reset(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        flow.criteria_by_category("6a").selected_value = "yes"
        merge_submission(flow, FlowSubmission(id=flow.id))
        assert flow.criteria_by_category("6a").selected_value is None

    def test_unmatched_entries_ignored(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        structure_before = [(c.id, c.category) for c in flow.criteria]
        merge_submission(
            flow,
            FlowSubmission(
                id=flow.id,
                fields=[FieldAnswer(id="no-such-field", answer="x")],
                criteria=[CriteriaSelection(category="no-such-category", selected_value="yes")],
            ),
        )
        assert [(c.id, c.category) for c in flow.criteria] == structure_before
        assert all(c.selected_value is None for c in flow.criteria)
        assert all(f.answer == "" for f in flow.survey.fields)

    def test_first_duplicate_wins(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        fid = _field_id(flow, "firstname")
        merge_submission(
            flow,
            FlowSubmission(
                id=flow.id,
                fields=[FieldAnswer(id=fid, answer="first"), FieldAnswer(id=fid, answer="second")],
                criteria=[
                    CriteriaSelection(category="6a", selected_value="yes"),
                    CriteriaSelection(category="6a", selected_value="no"),
                ],
            ),
        )
        assert _answers(flow)["firstname"] == "first"
        assert flow.criteria_by_category("6a").selected_value == "yes"

    def test_destination_replaced_when_present(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        dest_id = flow.destination.id
        merge_submission(
            flow,
            FlowSubmission(
                id=flow.id,
                destination=DestinationUpdate(email_addresses=["a@example.com"], postal_code="12345"),
            ),
        )
        assert flow.destination.id == dest_id
        assert flow.destination.email_addresses == ["a@example.com"]
        assert flow.destination.postal_code == "12345"

    def test_destination_kept_when_absent(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        flow.destination.email_addresses = ["keep@example.com"]
        flow.destination.postal_code = "99999"
        merge_submission(flow, FlowSubmission(id=flow.id))
        assert flow.destination.email_addresses == ["keep@example.com"]
        assert flow.destination.postal_code == "99999"

    def test_structure_unchanged(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        ids_before = [f.id for f in flow.survey.fields]
        forms_before = [(fm.id, len(fm.assignments)) for fm in flow.forms]
        merge_submission(
            flow,
            FlowSubmission(id=flow.id, fields=[FieldAnswer(id=ids_before[0], answer="x")]),
        )
        assert [f.id for f in flow.survey.fields] == ids_before
        assert [(fm.id, len(fm.assignments)) for fm in flow.forms] == forms_before
