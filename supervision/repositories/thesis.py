"""
Thesis store access.
"""

from sqlalchemy.orm import selectinload

from supervision.errors import NotFoundError, ValidationError
from supervision.extensions import db
from supervision.models import Lecturer, Student, StudyProgram, Thesis, ThesisSupervisor
from supervision.repositories import loader_options, normalize_pagination, storage_operation

DEFAULT_THESIS_EXPAND = (
    'student',
    'student.study_program',
    'supervisors',
    'supervisors.study_program',
)


def thesis_expansions(via=None):
    """
    Expansion table for the thesis graph.

    Args:
        via: Loader option pointing at a Thesis relationship of another
             entity (e.g. a schedule's thesis). None loads from Thesis itself.
    """
    def load(attr):
        if via is None:
            return selectinload(attr)
        return via.selectinload(attr)

    return {
        'student': lambda: [load(Thesis.student)],
        'student.study_program': lambda: [
            load(Thesis.student)
            .selectinload(Student.study_program)
            .selectinload(StudyProgram.faculty)
        ],
        'supervisors': lambda: [
            load(Thesis.supervisors).selectinload(ThesisSupervisor.lecturer)
        ],
        'supervisors.study_program': lambda: [
            load(Thesis.supervisors)
            .selectinload(ThesisSupervisor.lecturer)
            .selectinload(Lecturer.study_program)
            .selectinload(StudyProgram.faculty)
        ],
    }


@storage_operation('get thesis')
def get_thesis_by_id(thesis_id, expand=DEFAULT_THESIS_EXPAND):
    """Load a thesis by id, or None if it does not exist."""
    options = loader_options(thesis_expansions(), expand)
    return Thesis.query.options(*options).filter_by(id=thesis_id).first()


@storage_operation('get active thesis')
def _active_theses(student_id, expand):
    options = loader_options(thesis_expansions(), expand)
    return Thesis.query.options(*options).filter_by(
        student_id=student_id,
        is_active=True
    ).limit(2).all()


def get_active_thesis_for_student(student_id, expand=DEFAULT_THESIS_EXPAND):
    """
    Resolve the student's currently active thesis.

    Raises:
        NotFoundError: The student has no active thesis.
        ValidationError: The student has more than one active thesis.
    """
    theses = _active_theses(student_id, expand)
    if not theses:
        raise NotFoundError('thesis not found')
    if len(theses) > 1:
        raise ValidationError('student has more than one active thesis')
    return theses[0]


@storage_operation('get theses by lecturer')
def get_theses_by_lecturer(lecturer_id, page=None, per_page=None, expand=DEFAULT_THESIS_EXPAND):
    """
    Page through the theses a lecturer supervises, newest first.

    Returns:
        Flask-SQLAlchemy Pagination; count and items share one filter.
    """
    page, per_page = normalize_pagination(page, per_page)
    options = loader_options(thesis_expansions(), expand)
    query = Thesis.query.options(*options).filter(
        Thesis.supervisors.any(ThesisSupervisor.lecturer_id == lecturer_id)
    )
    return query.order_by(Thesis.created_at.desc(), Thesis.id.desc()).paginate(
        page=page, per_page=per_page, error_out=False
    )


@storage_operation('update thesis')
def update_thesis(thesis):
    """Persist the thesis fields."""
    db.session.add(thesis)
    db.session.commit()
    return thesis
