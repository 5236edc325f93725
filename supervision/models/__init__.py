"""
Models package initializer.

Imports all models so they are registered with SQLAlchemy for migrations.

Exports:
- User, UserRole (caller identity & roles)
- Faculty, StudyProgram (organizational affiliation)
- Student, Lecturer (academic profiles)
- Thesis, ThesisSupervisor, ThesisProgress (thesis aggregate)
- Schedule, ScheduleStatus (supervision sessions)
"""

from supervision.models.user import User, UserRole, LECTURER_ROLES
from supervision.models.academic import Faculty, StudyProgram
from supervision.models.student import Student
from supervision.models.lecturer import Lecturer
from supervision.models.thesis import Thesis, ThesisSupervisor, ThesisProgress
from supervision.models.schedule import Schedule, ScheduleStatus, TERMINAL_STATUSES

__all__ = [
    'User',
    'UserRole',
    'LECTURER_ROLES',
    'Faculty',
    'StudyProgram',
    'Student',
    'Lecturer',
    'Thesis',
    'ThesisSupervisor',
    'ThesisProgress',
    'Schedule',
    'ScheduleStatus',
    'TERMINAL_STATUSES'
]
