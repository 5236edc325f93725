"""
Schedule blueprint.

JSON API for supervision schedules:
- Proposing and editing schedules (students)
- Approving or rejecting schedules (supervising lecturers)
- Listing, detail, and deletion
"""

from flask import Blueprint

schedule_bp = Blueprint('schedule', __name__)

from . import routes  # noqa: F401, E402
