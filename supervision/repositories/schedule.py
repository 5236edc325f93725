"""
Schedule store access.

Mutations are single conditional statements. The caller learns the outcome
from the number of rows affected instead of checking state beforehand, so a
concurrent decision or delete cannot slip between a check and a write.
"""

from sqlalchemy.orm import joinedload

from supervision.extensions import db
from supervision.models import Schedule, ScheduleStatus, Thesis, ThesisSupervisor, User
from supervision.repositories import loader_options, normalize_pagination, storage_operation
from supervision.repositories.thesis import thesis_expansions

DEFAULT_SCHEDULE_EXPAND = (
    'thesis',
    'thesis.student',
    'thesis.student.study_program',
    'thesis.supervisors',
    'thesis.supervisors.study_program',
    'created_by',
    'approved_by',
)

DETAIL_FIELDS = ('proposed_at', 'start_time', 'end_time', 'description', 'location')


def schedule_expansions():
    """Expansion table for the schedule graph."""
    expansions = {
        'thesis': lambda: [joinedload(Schedule.thesis)],
        'created_by': lambda: [
            joinedload(Schedule.created_by).joinedload(User.student),
            joinedload(Schedule.created_by).joinedload(User.lecturer),
        ],
        'approved_by': lambda: [
            joinedload(Schedule.approved_by).joinedload(User.student),
            joinedload(Schedule.approved_by).joinedload(User.lecturer),
        ],
    }
    for name, factory in thesis_expansions(via=joinedload(Schedule.thesis)).items():
        expansions[f'thesis.{name}'] = factory
    return expansions


def _visible_to(query, user):
    """Restrict a schedule query to what the user may see."""
    if user.role.is_student:
        return query.filter(Schedule.created_by_id == user.id)
    if user.role.is_lecturer:
        return query.filter(Schedule.thesis.has(
            Thesis.supervisors.any(ThesisSupervisor.lecturer_id == user.lecturer_id)
        ))
    raise ValueError(f'Unhandled role: {user.role}')


@storage_operation('create schedule')
def create_schedule(schedule):
    """Insert a new schedule."""
    db.session.add(schedule)
    db.session.commit()
    return schedule


@storage_operation('get schedule')
def get_schedule_by_id(schedule_id, expand=DEFAULT_SCHEDULE_EXPAND):
    """Load a schedule by id, or None if it does not exist."""
    options = loader_options(schedule_expansions(), expand)
    return Schedule.query.options(*options).filter_by(id=schedule_id).first()


@storage_operation('get schedules')
def get_schedules_for_caller(user, page=None, per_page=None, expand=DEFAULT_SCHEDULE_EXPAND):
    """
    Page through the schedules visible to a user, newest first.

    Students see the schedules they created. Lecturers see the schedules
    whose thesis lists them as a supervisor.

    Returns:
        Flask-SQLAlchemy Pagination; count and items share one filter.
    """
    page, per_page = normalize_pagination(page, per_page)
    options = loader_options(schedule_expansions(), expand)
    query = _visible_to(Schedule.query.options(*options), user)
    return query.order_by(Schedule.created_at.desc(), Schedule.id.desc()).paginate(
        page=page, per_page=per_page, error_out=False
    )


@storage_operation('update schedule')
def update_schedule_details(schedule_id, created_by_id, **fields):
    """
    Overwrite the time window, description, and location of a pending schedule.

    Only rows created by ``created_by_id`` and still pending are touched.
    Status and approver are never written here.

    Returns:
        Number of rows updated (0 or 1).
    """
    values = {getattr(Schedule, name): fields[name] for name in DETAIL_FIELDS if name in fields}
    rows = Schedule.query.filter(
        Schedule.id == schedule_id,
        Schedule.created_by_id == created_by_id,
        Schedule.status == ScheduleStatus.PENDING
    ).update(values, synchronize_session='fetch')
    db.session.commit()
    return rows


@storage_operation('update schedule status')
def update_schedule_status(schedule_id, status, approver_id, allow_redecision=False):
    """
    Record a decision: status and approver in one UPDATE.

    Unless ``allow_redecision`` is set, only a pending schedule is updated.

    Returns:
        Number of rows updated (0 or 1).
    """
    if not status.is_terminal:
        raise ValueError(f'Not a decision status: {status}')

    query = Schedule.query.filter(Schedule.id == schedule_id)
    if not allow_redecision:
        query = query.filter(Schedule.status == ScheduleStatus.PENDING)
    rows = query.update({
        Schedule.status: status,
        Schedule.approved_by_id: approver_id
    }, synchronize_session='fetch')
    db.session.commit()
    return rows


@storage_operation('delete schedule')
def delete_schedule_by_id(schedule_id):
    """
    Delete a schedule.

    Returns:
        Number of rows deleted (0 or 1).
    """
    rows = Schedule.query.filter(Schedule.id == schedule_id).delete(synchronize_session='fetch')
    db.session.commit()
    return rows
