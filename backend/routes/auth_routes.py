# backend/routes/auth_routes.py

from flask import Blueprint, request, jsonify

import database
from models.student import find_by_email, check_password, public_profile
from utils.errors import AuthError, NotFoundError, ValidationError
from utils.logger import get_logger

auth = Blueprint("auth", __name__)
log = get_logger("auth")


# =====================================================
# ✅ LOGIN STUDENT (EMAIL + ROLL NUMBER)
# =====================================================
@auth.post("/student")
def login_student():
    data = request.get_json(silent=True) or {}

    email = data.get("email")
    password = data.get("password")

    if not email or not password or not isinstance(email, str):
        raise ValidationError("Email and password are required")

    students = database.load(database.STUDENTS)

    student = find_by_email(students, email)
    if not student:
        raise NotFoundError("Student not found with this email")

    if not check_password(student, password):
        log.info("Rejected login for %s", email)
        raise AuthError("Invalid password. Use your roll number as password.")

    return jsonify({
        "success": True,
        "message": "Login successful",
        "data": public_profile(student),
    }), 200
