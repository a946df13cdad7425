"""
Tests for plan reports and message chunking.
"""

import json

import pytest

from reports import (
    format_budget,
    format_plan_report,
    plan_to_json,
    report_filename,
    split_into_chunks,
)
from services import assemble_plan


@pytest.fixture
def plan_data(sample_request):
    return assemble_plan(sample_request)


def test_text_report_sections(plan_data):
    plan = plan_data.plans[0]
    report = format_plan_report(plan, plan_data.invitation_text)

    assert report.startswith("# Space Birthday Experience")
    assert "## Venue Suggestions\n- Local park in Austin" in report
    assert "## Budget\nEstimated Cost: USD 1000" in report
    assert report.index("## Activities") < report.index("## Food Ideas")
    assert report.rstrip().endswith(plan_data.invitation_text.rstrip())


def test_report_filename(plan_data):
    assert report_filename(plan_data.plans[0]) == "Space_Event_Plan.txt"


def test_json_dump_uses_camel_case(plan_data):
    data = json.loads(plan_to_json(plan_data))

    assert set(data) == {"plans", "invitationText", "budgetBreakdown"}
    assert data["budgetBreakdown"]["food"] == 400
    plan = data["plans"][0]
    assert plan["foodIdeas"]
    assert plan["estimatedCost"] == "USD 1000"
    assert plan["hostName"] == "Sam"


def test_format_budget(plan_data):
    text = format_budget(plan_data.budget_breakdown, "USD")
    assert "Food & Beverages: USD 400" in text
    assert text.endswith("Total: USD 1000")


class TestSplitIntoChunks:

    def test_short_text_is_one_chunk(self):
        assert split_into_chunks("hello", max_len=10) == ["hello"]

    def test_splits_at_paragraphs(self):
        text = "aaaa\n\nbbbb\n\ncccc"
        assert split_into_chunks(text, max_len=10) == ["aaaa\n\nbbbb", "cccc"]

    def test_long_paragraph_is_wrapped(self):
        text = "word " * 50
        chunks = split_into_chunks(text, max_len=40)
        assert all(len(chunk) <= 40 for chunk in chunks)
        assert "".join(chunks).split() == text.split()
