"""
Schedule blueprint routes.

Access:
    - Student: propose, edit own pending schedules, list own schedules
    - Lecturer roles: list and decide schedules of supervised theses
"""

from flask import request
from flask_login import login_required, current_user

from supervision.responses import (
    build_response_success, form_validation_error, pagination_args, require_json_object
)
from supervision.services import schedules

from . import schedule_bp
from .forms import ScheduleForm, ApprovalForm


@schedule_bp.route('', methods=['POST'])
@login_required
def create_schedule():
    """Propose a schedule for the caller's active thesis."""
    require_json_object(request)
    form = ScheduleForm()
    if not form.validate_on_submit():
        raise form_validation_error(form)

    data = schedules.create_schedule(current_user, **form.schedule_fields())
    return build_response_success('success create schedule', data), 201


@schedule_bp.route('', methods=['GET'])
@login_required
def list_schedules():
    """List schedules visible to the caller."""
    page, per_page = pagination_args(request)
    data, meta = schedules.list_schedules(current_user, page, per_page)
    return build_response_success('success get all schedules', data, meta)


@schedule_bp.route('/<schedule_id>', methods=['GET'])
@login_required
def schedule_detail(schedule_id):
    """Show one schedule."""
    data = schedules.get_schedule_detail(current_user, schedule_id)
    return build_response_success('success get detail schedule', data)


@schedule_bp.route('/<schedule_id>', methods=['PUT'])
@login_required
def update_schedule(schedule_id):
    """Edit time window, description, and location of a pending schedule."""
    require_json_object(request)
    form = ScheduleForm()
    if not form.validate_on_submit():
        raise form_validation_error(form)

    data = schedules.update_schedule(current_user, schedule_id, **form.schedule_fields())
    return build_response_success('success update schedule', data)


@schedule_bp.route('/<schedule_id>/approval', methods=['POST'])
@login_required
def approve_schedule(schedule_id):
    """Approve or reject a schedule."""
    require_json_object(request)
    form = ApprovalForm()
    if not form.validate_on_submit():
        raise form_validation_error(form)

    data = schedules.approve_schedule(current_user, schedule_id, form.status.data)
    return build_response_success('success update approval schedule', data)


@schedule_bp.route('/<schedule_id>', methods=['DELETE'])
@login_required
def delete_schedule(schedule_id):
    """Delete a schedule."""
    schedules.delete_schedule(current_user, schedule_id)
    return build_response_success('success delete schedule')
