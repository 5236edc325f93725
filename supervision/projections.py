"""
Response projections.

Pure functions turning model graphs into the dictionaries returned by the
API. Every read and write path renders people, theses, and schedules through
these functions so the shapes never drift apart.

A person is rendered from the profile matching their role: students carry
their NIM under ``nim``, lecturer roles carry their NIP under ``nip``. Both
also appear under ``identifier``.
"""

from datetime import timezone

from supervision.models import UserRole


def _isoformat(value):
    """Render a stored UTC datetime as ISO 8601 with a Z suffix."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + 'Z'



def _affiliation(profile):
    program = profile.study_program if profile is not None else None
    if program is None:
        return None, None
    return program.name, program.faculty.name if program.faculty else None


def _person(entity_id, profile, role):
    """Render a person from their profile, keyed on role."""
    study_program, faculty = _affiliation(profile)
    if role is UserRole.STUDENT:
        identifier_key = 'nim'
        identifier = profile.nim if profile else None
    elif role.is_lecturer:
        identifier_key = 'nip'
        identifier = profile.nip if profile else None
    else:
        raise ValueError(f'Unhandled role: {role}')

    return {
        'id': entity_id,
        'name': profile.name if profile else None,
        'role': role.value,
        'identifier': identifier,
        identifier_key: identifier,
        'study_program': study_program,
        'faculty': faculty
    }


def project_identity(user):
    """Render a User (creator or approver); None stays None."""
    if user is None:
        return None
    return _person(user.id, user.profile, user.role)


def project_student(student):
    """Render the student owning a thesis."""
    if student is None:
        return None
    return _person(student.id, student, UserRole.STUDENT)


def project_supervisor(supervisor):
    """Render a ThesisSupervisor assignment with its lecturer."""
    return _person(supervisor.lecturer_id, supervisor.lecturer, supervisor.role)


def project_thesis(thesis):
    """Render a thesis with its student and ordered supervisors."""
    return {
        'id': thesis.id,
        'title': thesis.title,
        'description': thesis.description,
        'progress': thesis.progress.value,
        'student': project_student(thesis.student),
        'supervisors': [project_supervisor(s) for s in thesis.supervisors]
    }


def project_schedule(schedule):
    """Render a schedule with its thesis, creator, and approver."""
    return {
        'id': schedule.id,
        'proposed_at': _isoformat(schedule.proposed_at),
        'start_time': _isoformat(schedule.start_time),
        'end_time': _isoformat(schedule.end_time),
        'status': schedule.status.value,
        'description': schedule.description,
        'location': schedule.location,
        'thesis': project_thesis(schedule.thesis),
        'created_by': project_identity(schedule.created_by),
        'approved_by': project_identity(schedule.approved_by),
        'created_at': _isoformat(schedule.created_at)
    }


def project_pagination(pagination):
    """Render pagination metadata; max_page is ceil(count / per_page)."""
    return {
        'page': pagination.page,
        'per_page': pagination.per_page,
        'max_page': pagination.pages,
        'count': pagination.total
    }
