"""
Thesis workflow: detail, student update, and lecturer listing.
"""

from flask import current_app

from supervision.errors import AuthorizationError, NotFoundError, ValidationError
from supervision.models import ThesisProgress
from supervision.projections import project_pagination, project_thesis
from supervision.repositories import thesis as thesis_repo


def _parse_progress(progress):
    if isinstance(progress, ThesisProgress):
        return progress
    try:
        return ThesisProgress(progress)
    except ValueError:
        raise ValidationError(f'invalid thesis progress: {progress}') from None


def get_thesis_detail(thesis_id):
    """
    Get a thesis with its student and supervisors.

    Raises:
        NotFoundError: Thesis does not exist.
    """
    thesis = thesis_repo.get_thesis_by_id(thesis_id)
    if thesis is None:
        current_app.logger.warning(f'Thesis {thesis_id} not found')
        raise NotFoundError('thesis not found')
    return project_thesis(thesis)


def update_thesis(caller, thesis_id, title, progress, description=None):
    """
    Update title, description, and progress of the caller's own thesis.

    Raises:
        AuthorizationError: Caller is a lecturer, or not the thesis owner.
        NotFoundError: Thesis does not exist.
        ValidationError: Progress is not a known stage.
    """
    if caller.is_lecturer():
        current_app.logger.warning(f'Lecturer {caller.id} tried to update thesis {thesis_id}')
        raise AuthorizationError('lecturer cannot update thesis')

    thesis = thesis_repo.get_thesis_by_id(thesis_id)
    if thesis is None:
        current_app.logger.warning(f'Thesis {thesis_id} not found')
        raise NotFoundError('thesis not found')

    if thesis.student_id != caller.student_id:
        current_app.logger.warning(f'Student {caller.id} tried to update thesis {thesis_id} of another student')
        raise AuthorizationError('only the owning student can update this thesis')

    thesis.progress = _parse_progress(progress)
    thesis.title = title
    thesis.description = description
    thesis_repo.update_thesis(thesis)

    current_app.logger.info(f'Thesis {thesis_id} updated (progress {thesis.progress.value})')
    return project_thesis(thesis)


def list_theses_by_lecturer(caller, lecturer_id, page=None, per_page=None):
    """
    List the theses a lecturer supervises.

    Returns:
        Tuple of (list of thesis dicts, pagination meta dict).

    Raises:
        AuthorizationError: Caller is a student.
    """
    if caller.is_student():
        current_app.logger.warning(f'Student {caller.id} tried to list theses of lecturer {lecturer_id}')
        raise AuthorizationError('student cannot read all lecturer theses')

    pagination = thesis_repo.get_theses_by_lecturer(lecturer_id, page, per_page)
    current_app.logger.info(f'Listed {len(pagination.items)} theses for lecturer {lecturer_id}')
    return [project_thesis(t) for t in pagination.items], project_pagination(pagination)
