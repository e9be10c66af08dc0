# backend/models/marks.py
import copy
import numbers

from utils.errors import ValidationError

ROLL_NO = "Roll No"
SUBJECTS = "Subjects"

MID_1 = "Mid 1"
MID_2 = "Mid 2"
AVERAGE = "Average"
NOT_RECORDED = "NA"

SCORE_FIELDS = (MID_1, MID_2, AVERAGE)

# short request aliases take precedence over the persisted names
FIELD_ALIASES = {
    MID_1: ("mid1", MID_1),
    MID_2: ("mid2", MID_2),
    AVERAGE: ("average", AVERAGE),
}


def default_score():
    return {field: NOT_RECORDED for field in SCORE_FIELDS}


def new_record(roll_no):
    return {ROLL_NO: roll_no, SUBJECTS: {}}


def subjects_of(record):
    """Subject scores of a stored record; `{}` when the record has none usable."""
    subjects = (record or {}).get(SUBJECTS)
    return subjects if isinstance(subjects, dict) else {}


def _is_score_value(value):
    return isinstance(value, (str, numbers.Real)) and not isinstance(value, bool)


def score_text(value):
    """Render a score the way it is persisted: strings as-is, numbers as text."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# =====================================================
# INPUT CHECKS (CALLERS RUN THESE BEFORE MERGING)
# =====================================================
def validate_partial(partial, subject=None):
    label = f" for {subject}" if subject else ""
    if not isinstance(partial, dict):
        raise ValidationError(f"Invalid marks data{label}. Expected an object.")

    for field, aliases in FIELD_ALIASES.items():
        for alias in aliases:
            value = partial.get(alias)
            if value is not None and not _is_score_value(value):
                raise ValidationError(f"Invalid value for '{alias}'{label}. Use a number, a numeric string or \"NA\".")


def normalize_partial(partial):
    """Map request field names onto persisted names, keeping only provided fields."""
    provided = {}
    for field, aliases in FIELD_ALIASES.items():
        for alias in aliases:
            if partial.get(alias) is not None:
                provided[field] = score_text(partial[alias])
                break
    return provided


# =====================================================
# MERGE ENGINE
# =====================================================
def merge_subjects(existing_record, roll_no, updates):
    """
    Merge partial subject scores into a marks record.

    `updates` maps subject name -> partial score. Fields a partial leaves out
    keep their current value; a subject seen for the first time starts from
    "NA" for all three fields. The caller's record is never mutated.
    """
    if existing_record is None:
        record = new_record(roll_no)
    else:
        record = copy.deepcopy(existing_record)
        record[SUBJECTS] = subjects_of(record)

    subjects = record[SUBJECTS]
    for subject, partial in updates.items():
        current = subjects.get(subject)
        if not isinstance(current, dict):
            current = default_score()

        provided = normalize_partial(partial)
        subjects[subject] = {
            field: provided.get(field, current.get(field, NOT_RECORDED))
            for field in SCORE_FIELDS
        }

    return record
