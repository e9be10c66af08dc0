# backend/routes/marks_routes.py

from flask import Blueprint, request, jsonify

import database
from models.marks import ROLL_NO, SUBJECTS, merge_subjects, validate_partial
from utils.errors import NotFoundError, ValidationError
from utils.logger import get_logger
from utils.time_utils import now_iso

marks = Blueprint("marks", __name__)
log = get_logger("marks")


# =====================================================
# HELPER: LOAD → MERGE → SAVE (ONE CYCLE PER REQUEST)
# =====================================================
def apply_updates(roll_no, updates):
    collection = database.get_collection(database.MARKS)

    with collection.locked():
        records = collection.load()
        index, existing = database.find_record(records, ROLL_NO, roll_no)

        merged = merge_subjects(existing, roll_no, updates)

        if index == -1:
            records.append(merged)
        else:
            records[index] = merged

        collection.save(records)

    return merged


def _single_subject_response(roll_no, subject, merged):
    return jsonify({
        "success": True,
        "message": f"{subject} marks updated successfully for {roll_no}",
        "data": merged[SUBJECTS][subject],
        "rollNo": roll_no,
        "subject": subject,
        "timestamp": now_iso(),
    }), 200


# =====================================================
# ✅ ALL MARKS
# =====================================================
@marks.get("")
def list_marks():
    records = database.load(database.MARKS)
    return jsonify({"success": True, "data": records}), 200


# =====================================================
# ✅ MARKS FOR ONE STUDENT
# =====================================================
@marks.get("/<roll_no>")
def get_marks(roll_no):
    records = database.load(database.MARKS)

    _, record = database.find_record(records, ROLL_NO, roll_no)
    if not record:
        raise NotFoundError("Marks not found for this student")

    return jsonify({"success": True, "data": record}), 200


# =====================================================
# ✅ BULK MERGE (SEVERAL SUBJECTS)
# =====================================================
@marks.put("/<roll_no>")
def update_marks(roll_no):
    data = request.get_json(silent=True) or {}
    subjects = data.get("subjects") if isinstance(data, dict) else None

    if not isinstance(subjects, dict):
        raise ValidationError("Invalid request. Please provide subjects data.")

    for subject, partial in subjects.items():
        if not subject.strip():
            raise ValidationError("Subject name is required")
        validate_partial(partial, subject)

    log.info("PUT update marks for %s: %s", roll_no, subjects)
    merged = apply_updates(roll_no, subjects)

    return jsonify({
        "success": True,
        "message": "Marks updated successfully",
        "data": merged,
        "timestamp": now_iso(),
    }), 200


# =====================================================
# ✅ MERGE ONE SUBJECT (SUBJECT IN URL)
# =====================================================
@marks.patch("/<roll_no>/<path:subject>")
def patch_subject(roll_no, subject):
    partial = request.get_json(silent=True) or {}

    if not subject.strip():
        raise ValidationError("Subject name is required")
    validate_partial(partial, subject)

    log.info("PATCH update marks for %s, subject: %s %s", roll_no, subject, partial)
    merged = apply_updates(roll_no, {subject: partial})

    return _single_subject_response(roll_no, subject, merged)


# =====================================================
# ✅ MERGE ONE SUBJECT (SUBJECT IN BODY)
# =====================================================
@marks.post("/<roll_no>/update")
def post_subject(roll_no):
    data = request.get_json(silent=True) or {}
    subject = data.get("subject") if isinstance(data, dict) else None

    if not subject or not isinstance(subject, str) or not subject.strip():
        raise ValidationError("Subject name is required")

    partial = {k: v for k, v in data.items() if k != "subject"}
    validate_partial(partial, subject)

    log.info("POST update marks for %s, subject: %s %s", roll_no, subject, partial)
    merged = apply_updates(roll_no, {subject: partial})

    return _single_subject_response(roll_no, subject, merged)
