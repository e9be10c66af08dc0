"""
Unit tests for the marks merge engine
"""
import pytest

from models.marks import (
    default_score,
    merge_subjects,
    normalize_partial,
    score_text,
    subjects_of,
    validate_partial,
)
from utils.errors import ValidationError


def _record(subjects):
    return {"Roll No": "R1", "Subjects": subjects}


class TestMergeSubjects:

    def test_new_record_from_numbers(self):
        merged = merge_subjects(None, "R1", {"Math": {"mid1": 50, "mid2": 60, "average": 55}})
        assert merged == {
            "Roll No": "R1",
            "Subjects": {"Math": {"Mid 1": "50", "Mid 2": "60", "Average": "55"}},
        }

    def test_new_subject_defaults_omitted_fields_to_na(self):
        merged = merge_subjects(None, "R1", {"Math": {"mid2": "41"}})
        assert merged["Subjects"]["Math"] == {"Mid 1": "NA", "Mid 2": "41", "Average": "NA"}

    def test_partial_update_keeps_other_fields(self):
        existing = _record({"Math": {"Mid 1": "30", "Mid 2": "40", "Average": "35"}})
        merged = merge_subjects(existing, "R1", {"Math": {"mid1": 45}})
        assert merged["Subjects"]["Math"] == {"Mid 1": "45", "Mid 2": "40", "Average": "35"}

    def test_other_subjects_untouched(self):
        existing = _record({
            "Math": {"Mid 1": "30", "Mid 2": "40", "Average": "35"},
            "Physics": {"Mid 1": "20", "Mid 2": "NA", "Average": "NA"},
        })
        merged = merge_subjects(existing, "R1", {"Physics": {"mid2": 22}})
        assert merged["Subjects"]["Math"] == {"Mid 1": "30", "Mid 2": "40", "Average": "35"}
        assert merged["Subjects"]["Physics"] == {"Mid 1": "20", "Mid 2": "22", "Average": "NA"}

    def test_none_is_treated_as_omitted(self):
        existing = _record({"Math": {"Mid 1": "30", "Mid 2": "40", "Average": "35"}})
        merged = merge_subjects(existing, "R1", {"Math": {"mid1": None, "average": "38"}})
        assert merged["Subjects"]["Math"] == {"Mid 1": "30", "Mid 2": "40", "Average": "38"}

    def test_zero_is_a_provided_value(self):
        existing = _record({"Math": {"Mid 1": "30", "Mid 2": "40", "Average": "35"}})
        merged = merge_subjects(existing, "R1", {"Math": {"mid1": 0}})
        assert merged["Subjects"]["Math"]["Mid 1"] == "0"

    def test_persisted_field_names_accepted(self):
        merged = merge_subjects(None, "R1", {"Math": {"Mid 1": "12", "Average": 14}})
        assert merged["Subjects"]["Math"] == {"Mid 1": "12", "Mid 2": "NA", "Average": "14"}

    def test_short_alias_wins_over_persisted_name(self):
        merged = merge_subjects(None, "R1", {"Math": {"mid1": 9, "Mid 1": 1}})
        assert merged["Subjects"]["Math"]["Mid 1"] == "9"

    def test_explicit_na_overwrites(self):
        existing = _record({"Math": {"Mid 1": "30", "Mid 2": "40", "Average": "35"}})
        merged = merge_subjects(existing, "R1", {"Math": {"average": "NA"}})
        assert merged["Subjects"]["Math"]["Average"] == "NA"

    def test_existing_record_not_mutated(self):
        existing = _record({"Math": {"Mid 1": "30", "Mid 2": "40", "Average": "35"}})
        merge_subjects(existing, "R1", {"Math": {"mid1": 45}, "Art": {"mid1": 1}})
        assert existing == _record({"Math": {"Mid 1": "30", "Mid 2": "40", "Average": "35"}})

    def test_record_without_subjects_key(self):
        merged = merge_subjects({"Roll No": "R1"}, "R1", {"Math": {"mid1": 5}})
        assert merged["Subjects"] == {"Math": {"Mid 1": "5", "Mid 2": "NA", "Average": "NA"}}

    def test_empty_updates_returns_copy(self):
        existing = _record({"Math": default_score()})
        merged = merge_subjects(existing, "R1", {})
        assert merged == existing
        assert merged is not existing


class TestScoreHelpers:

    @pytest.mark.parametrize("value, expected", [
        (45, "45"),
        (45.0, "45"),
        (42.5, "42.5"),
        ("38", "38"),
        ("NA", "NA"),
        (0, "0"),
    ])
    def test_score_text(self, value, expected):
        assert score_text(value) == expected

    def test_normalize_partial_drops_unprovided(self):
        assert normalize_partial({"mid2": 7, "average": None}) == {"Mid 2": "7"}

    def test_subjects_of(self):
        assert subjects_of(_record({"Math": {}, "Art": {}})) == {"Math": {}, "Art": {}}
        assert subjects_of(None) == {}
        assert subjects_of({"Roll No": "R1"}) == {}
        assert subjects_of({"Roll No": "R1", "Subjects": []}) == {}

    @pytest.mark.parametrize("partial", [
        ["mid1", 4],
        "45",
        {"mid1": True},
        {"mid2": [1, 2]},
        {"Average": {"value": 3}},
    ])
    def test_validate_partial_rejects(self, partial):
        with pytest.raises(ValidationError):
            validate_partial(partial, "Math")

    def test_validate_partial_accepts(self):
        validate_partial({"mid1": 3, "mid2": "4.5", "average": None, "note": [1]})
