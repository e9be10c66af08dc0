# backend/routes/report_routes.py

import io

import pandas as pd
from flask import Blueprint, send_file
from reportlab.pdfgen import canvas

import database
from models.marks import ROLL_NO, SCORE_FIELDS, NOT_RECORDED, subjects_of
from models.student import find_by_roll
from utils.errors import NotFoundError, ReadError
from utils.logger import get_logger

report = Blueprint("report", __name__)
log = get_logger("report")


# =====================================================
# HELPERS
# =====================================================
def _load_roster():
    # reports still render when the roster is unreadable
    try:
        return database.load(database.STUDENTS)
    except ReadError:
        log.warning("Roster unavailable, exporting marks without names")
        return []


# =====================================================
# ✅ 1) REPORT CARD → PDF
# =====================================================
@report.get("/marks/<roll_no>/pdf")
def marks_pdf(roll_no):
    records = database.load(database.MARKS)
    _, record = database.find_record(records, ROLL_NO, roll_no)
    if not record:
        raise NotFoundError("Marks not found for this student")

    student = find_by_roll(_load_roster(), roll_no) or {}
    subjects = subjects_of(record)

    buf = io.BytesIO()
    c = canvas.Canvas(buf)

    c.setFont("Helvetica-Bold", 18)
    c.drawString(50, 800, "Academic Performance")
    c.setFont("Helvetica", 13)
    c.drawString(50, 770, f"Roll No: {roll_no}")
    if student.get("name"):
        c.drawString(50, 750, f"Name: {student['name']}")
    if student.get("section"):
        c.drawString(50, 730, f"Section: {student['section']}")

    c.setFont("Helvetica-Bold", 12)
    y = 700
    c.drawString(50, y, "Subject")
    for i, field in enumerate(SCORE_FIELDS):
        c.drawString(300 + i * 80, y, field)

    c.setFont("Helvetica", 12)
    y -= 20
    if not subjects:
        c.drawString(50, y, "No marks available")

    for subject, score in subjects.items():
        c.drawString(50, y, str(subject))
        for i, field in enumerate(SCORE_FIELDS):
            value = score.get(field, NOT_RECORDED) if isinstance(score, dict) else NOT_RECORDED
            c.drawString(300 + i * 80, y, str(value))
        y -= 18
        if y < 50:
            c.showPage()
            c.setFont("Helvetica", 12)
            y = 800

    c.save()
    buf.seek(0)
    return send_file(
        buf,
        as_attachment=True,
        download_name=f"{roll_no}_marks_report.pdf",
        mimetype="application/pdf",
    )


# =====================================================
# ✅ 2) CLASS MARKS → EXCEL
# =====================================================
@report.get("/marks/export")
def export_marks():
    records = database.load(database.MARKS)
    students = {s.get("roll_no"): s for s in _load_roster() if isinstance(s, dict)}

    rows = []
    for r in records:
        if not isinstance(r, dict):
            continue
        roll_no = r.get(ROLL_NO)
        meta = students.get(roll_no) or {}
        for subject, score in subjects_of(r).items():
            score = score if isinstance(score, dict) else {}
            rows.append([
                roll_no,
                meta.get("name", ""),
                meta.get("section", ""),
                subject,
                score.get(SCORE_FIELDS[0], NOT_RECORDED),
                score.get(SCORE_FIELDS[1], NOT_RECORDED),
                score.get(SCORE_FIELDS[2], NOT_RECORDED),
            ])

    if not rows:
        raise NotFoundError("No marks found")

    df = pd.DataFrame(
        rows,
        columns=["Roll No", "Name", "Section", "Subject", *SCORE_FIELDS],
    )

    buf = io.BytesIO()
    df.to_excel(buf, index=False, engine="openpyxl")
    buf.seek(0)

    return send_file(
        buf,
        as_attachment=True,
        download_name="class_marks.xlsx",
        mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
