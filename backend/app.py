import os

from flask import Flask
from flask_cors import CORS

from database import init_db
from routes.auth_routes import auth
from routes.marks_routes import marks
from routes.report_routes import report
from routes.student_routes import student
from routes.system_routes import system
from utils.errors import register_error_handlers
from utils.logger import get_logger

log = get_logger("app")

# =====================================================
# BASE DIRECTORY
# =====================================================
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# =====================================================
# DATA FILES + RUNTIME FOLDERS (ENV OVERRIDABLE)
# =====================================================
DATA_FOLDER = os.path.join(BASE_DIR, "data")

STUDENTS_FILE = os.getenv("STUDENTS_FILE", os.path.join(DATA_FOLDER, "students.json"))
MARKS_FILE = os.getenv("MARKS_FILE", os.path.join(DATA_FOLDER, "student_marks.json"))

PORT = int(os.getenv("PORT", "3002"))


def create_app(config=None):
    app = Flask(__name__)
    CORS(app)

    app.config["STUDENTS_FILE"] = STUDENTS_FILE
    app.config["MARKS_FILE"] = MARKS_FILE
    app.json.sort_keys = False
    if config:
        app.config.update(config)

    init_db(app)
    register_error_handlers(app)

    # =====================================================
    # BLUEPRINTS
    # =====================================================
    app.register_blueprint(student, url_prefix="/api/students")
    app.register_blueprint(marks, url_prefix="/api/marks")
    app.register_blueprint(auth, url_prefix="/api/auth")
    app.register_blueprint(report, url_prefix="/api/reports")
    app.register_blueprint(system, url_prefix="/api")

    return app


app = create_app()


def main():
    log.info("Student Marks Server running on http://localhost:%s", PORT)
    log.info("API endpoints available at http://localhost:%s/api/", PORT)
    app.run(host="0.0.0.0", port=PORT, threaded=True)


# =====================================================
# LOCAL RUN ONLY (USE A WSGI SERVER IN PRODUCTION)
# =====================================================
if __name__ == "__main__":
    main()
