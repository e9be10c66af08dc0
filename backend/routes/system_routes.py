# backend/routes/system_routes.py
import time

from flask import Blueprint, jsonify

from utils.time_utils import now_iso

system = Blueprint("system", __name__)

_STARTED = time.monotonic()


# =====================================================
# HEALTH CHECK
# =====================================================
@system.get("/health")
def health():
    return jsonify({
        "success": True,
        "message": "Server is running",
        "timestamp": now_iso(),
        "uptime": round(time.monotonic() - _STARTED, 3),
    }), 200
