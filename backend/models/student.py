# backend/models/student.py

PUBLIC_FIELDS = ("roll_no", "name", "email", "section", "gender")


def find_by_roll(students, roll_no):
    for s in students:
        if isinstance(s, dict) and s.get("roll_no") == roll_no:
            return s
    return None


def find_by_email(students, email):
    wanted = email.lower()
    for s in students:
        if not isinstance(s, dict):
            continue
        stored = s.get("email")
        if isinstance(stored, str) and stored.lower() == wanted:
            return s
    return None


def public_profile(student):
    return {field: student.get(field) for field in PUBLIC_FIELDS}


# NOTE: the roll number doubles as the password; compared as plain text.
def check_password(student, password):
    return student.get("roll_no") == password
