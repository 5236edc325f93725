"""
Schedule workflow.

States:
    pending -> approved
    pending -> rejected

Students propose schedules for their active thesis and may edit them while
pending. Supervising lecturers decide them. Decisions are final unless
SCHEDULE_ALLOW_REDECISION is enabled. Times are stored as naive UTC.
"""

from datetime import timezone

from flask import current_app

from supervision.errors import (
    AuthorizationError, ConflictError, NotFoundError, ValidationError
)
from supervision.models import Schedule, ScheduleStatus
from supervision.projections import project_pagination, project_schedule
from supervision.repositories import schedule as schedule_repo
from supervision.repositories import thesis as thesis_repo


def _naive_utc(value):
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _validate_window(start_time, end_time):
    if end_time <= start_time:
        raise ValidationError('end_time must be after start_time')


def _parse_status(status):
    if isinstance(status, ScheduleStatus):
        return status
    try:
        return ScheduleStatus(status)
    except ValueError:
        raise ValidationError(f'invalid schedule status: {status}') from None


def _can_view(caller, schedule):
    if caller.role.is_student:
        return schedule.created_by_id == caller.id
    return schedule.thesis.is_supervised_by(caller.lecturer_id)


def _load(schedule_id, expand=schedule_repo.DEFAULT_SCHEDULE_EXPAND):
    schedule = schedule_repo.get_schedule_by_id(schedule_id, expand=expand)
    if schedule is None:
        current_app.logger.warning(f'Schedule {schedule_id} not found')
        raise NotFoundError('schedule not found')
    return schedule


def create_schedule(caller, proposed_at, start_time, end_time, description=None, location=None):
    """
    Propose a supervision session for the caller's active thesis.

    Raises:
        AuthorizationError: Caller is not a student.
        NotFoundError: Caller has no active thesis.
        ValidationError: Caller has several active theses, or the time
            window is empty.
    """
    if not caller.is_student() or caller.student_id is None:
        current_app.logger.warning(f'User {caller.id} ({caller.role.value}) tried to propose a schedule')
        raise AuthorizationError('only students can propose schedules')

    proposed_at, start_time, end_time = (_naive_utc(v) for v in (proposed_at, start_time, end_time))
    _validate_window(start_time, end_time)

    try:
        thesis = thesis_repo.get_active_thesis_for_student(caller.student_id, expand=())
    except (NotFoundError, ValidationError) as exc:
        current_app.logger.warning(
            f'Cannot resolve active thesis for student {caller.student_id}: {exc.message}'
        )
        raise

    schedule = Schedule(
        proposed_at=proposed_at,
        start_time=start_time,
        end_time=end_time,
        status=ScheduleStatus.PENDING,
        description=description,
        location=location,
        thesis_id=thesis.id,
        created_by_id=caller.id,
        approved_by_id=None
    )
    schedule_repo.create_schedule(schedule)
    current_app.logger.info(f'Schedule {schedule.id} created for thesis {thesis.id}')

    return project_schedule(_load(schedule.id))


def list_schedules(caller, page=None, per_page=None):
    """
    List the schedules visible to the caller.

    Returns:
        Tuple of (list of schedule dicts, pagination meta dict).
    """
    pagination = schedule_repo.get_schedules_for_caller(caller, page, per_page)
    current_app.logger.info(
        f'Listed {len(pagination.items)} schedules for user {caller.id} (page {pagination.page})'
    )
    return [project_schedule(s) for s in pagination.items], project_pagination(pagination)


def get_schedule_detail(caller, schedule_id):
    """
    Get one schedule the caller may see.

    Raises:
        NotFoundError: Schedule does not exist.
        AuthorizationError: Schedule is outside the caller's visibility.
    """
    schedule = _load(schedule_id)
    if not _can_view(caller, schedule):
        current_app.logger.warning(f'User {caller.id} denied access to schedule {schedule_id}')
        raise AuthorizationError('access denied')
    return project_schedule(schedule)


def update_schedule(caller, schedule_id, proposed_at, start_time, end_time,
                    description=None, location=None):
    """
    Edit the time window, description, and location of a pending schedule.

    Raises:
        NotFoundError: Schedule or its thesis does not exist.
        AuthorizationError: Caller did not create the schedule.
        ConflictError: Schedule has already been decided.
        ValidationError: The time window is empty.
    """
    schedule = _load(schedule_id, expand=())

    if thesis_repo.get_thesis_by_id(schedule.thesis_id, expand=()) is None:
        current_app.logger.warning(f'Thesis {schedule.thesis_id} of schedule {schedule_id} not found')
        raise NotFoundError('thesis not found')

    if schedule.created_by_id != caller.id:
        current_app.logger.warning(f'User {caller.id} tried to edit schedule {schedule_id} of another user')
        raise AuthorizationError('only the creator can update this schedule')

    if not schedule.is_pending:
        raise ConflictError(f'schedule is already {schedule.status.value}')

    proposed_at, start_time, end_time = (_naive_utc(v) for v in (proposed_at, start_time, end_time))
    _validate_window(start_time, end_time)

    rows = schedule_repo.update_schedule_details(
        schedule_id,
        caller.id,
        proposed_at=proposed_at,
        start_time=start_time,
        end_time=end_time,
        description=description,
        location=location
    )
    if rows == 0:
        # Decided or deleted since it was read
        _load(schedule_id, expand=())
        raise ConflictError('schedule is no longer pending')

    current_app.logger.info(f'Schedule {schedule_id} updated')
    return project_schedule(_load(schedule_id))


def approve_schedule(caller, schedule_id, status):
    """
    Approve or reject a schedule.

    Raises:
        AuthorizationError: Caller is a student, or does not supervise the
            schedule's thesis.
        ValidationError: Status is unknown or not approved/rejected.
        NotFoundError: Schedule does not exist.
        ConflictError: Schedule was already decided and re-decision is off.
    """
    if caller.is_student():
        current_app.logger.warning(f'Student {caller.id} tried to decide schedule {schedule_id}')
        raise AuthorizationError('access denied')

    new_status = _parse_status(status)
    if not new_status.is_terminal:
        current_app.logger.warning(f'Schedule {schedule_id} cannot be set to {new_status.value}')
        raise ValidationError(f'invalid schedule status: {new_status.value}')

    schedule = _load(schedule_id, expand=('thesis', 'thesis.supervisors'))
    if not schedule.thesis.is_supervised_by(caller.lecturer_id):
        current_app.logger.warning(f'Lecturer {caller.id} does not supervise thesis {schedule.thesis_id}')
        raise AuthorizationError('only a supervisor of the thesis can decide this schedule')

    rows = schedule_repo.update_schedule_status(
        schedule_id,
        new_status,
        caller.id,
        allow_redecision=current_app.config['SCHEDULE_ALLOW_REDECISION']
    )
    if rows == 0:
        _load(schedule_id, expand=())
        current_app.logger.warning(f'Schedule {schedule_id} was already decided')
        raise ConflictError('schedule already decided')

    current_app.logger.info(f'Schedule {schedule_id} {new_status.value} by {caller.id}')
    return project_schedule(_load(schedule_id))


def delete_schedule(caller, schedule_id):
    """
    Delete a schedule.

    Raises:
        NotFoundError: Schedule does not exist.
    """
    if schedule_repo.delete_schedule_by_id(schedule_id) == 0:
        current_app.logger.warning(f'Schedule {schedule_id} not found for delete')
        raise NotFoundError('schedule not found')
    current_app.logger.info(f'Schedule {schedule_id} deleted by {caller.id}')
