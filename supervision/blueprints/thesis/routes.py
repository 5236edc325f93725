"""
Thesis blueprint routes.

Access:
    - Any authenticated user: thesis detail
    - Student: update own thesis
    - Lecturer roles: list theses supervised by a lecturer
"""

from flask import request
from flask_login import login_required, current_user

from supervision.responses import (
    build_response_success, form_validation_error, pagination_args, require_json_object
)
from supervision.services import theses

from . import thesis_bp
from .forms import ThesisForm


@thesis_bp.route('/<thesis_id>', methods=['GET'])
@login_required
def thesis_detail(thesis_id):
    """Show a thesis with its student and supervisors."""
    data = theses.get_thesis_detail(thesis_id)
    return build_response_success('success get detail thesis', data)


@thesis_bp.route('/<thesis_id>', methods=['PUT'])
@login_required
def update_thesis(thesis_id):
    """Update title, description, and progress."""
    require_json_object(request)
    form = ThesisForm()
    if not form.validate_on_submit():
        raise form_validation_error(form)

    data = theses.update_thesis(
        current_user,
        thesis_id,
        title=form.title.data,
        progress=form.progress.data,
        description=form.description.data or None
    )
    return build_response_success('success update thesis', data)


@thesis_bp.route('/lecturer/<lecturer_id>', methods=['GET'])
@login_required
def lecturer_theses(lecturer_id):
    """List theses supervised by a lecturer."""
    page, per_page = pagination_args(request)
    data, meta = theses.list_theses_by_lecturer(current_user, lecturer_id, page, per_page)
    return build_response_success('success get all theses', data, meta)
