# backend/routes/student_routes.py

from flask import Blueprint, jsonify

import database
from models.student import find_by_roll
from utils.errors import NotFoundError

student = Blueprint("student", __name__)


# =====================================================
# ✅ LIST STUDENTS
# =====================================================
@student.get("")
def list_students():
    students = database.load(database.STUDENTS)
    return jsonify({"success": True, "data": students}), 200


# =====================================================
# ✅ STUDENT BY ROLL NUMBER
# =====================================================
@student.get("/<roll_no>")
def get_student(roll_no):
    students = database.load(database.STUDENTS)

    record = find_by_roll(students, roll_no)
    if not record:
        raise NotFoundError("Student not found")

    return jsonify({"success": True, "data": record}), 200
