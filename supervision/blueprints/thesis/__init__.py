"""
Thesis blueprint.

JSON API for thesis records:
- Thesis detail with student and supervisors
- Progress updates by the owning student
- Theses supervised by a lecturer
"""

from flask import Blueprint

thesis_bp = Blueprint('thesis', __name__)

from . import routes  # noqa: F401, E402
