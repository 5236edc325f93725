"""
User model and roles for caller identity.

A user is the authenticated principal behind a bearer token. Students and
lecturers keep their academic data in a linked profile:
- student: Student profile, identified by NIM
- lecturer, primary_lecturer, secondary_lecturer: Lecturer profile, identified by NIP
"""

import uuid
from datetime import datetime
from enum import Enum
from flask_login import UserMixin

from supervision.extensions import db


def generate_uuid():
    """Return a fresh primary key value."""
    return str(uuid.uuid4())


class UserRole(Enum):
    """Enumeration for user roles."""
    STUDENT = 'student'
    LECTURER = 'lecturer'
    PRIMARY_LECTURER = 'primary_lecturer'
    SECONDARY_LECTURER = 'secondary_lecturer'

    @property
    def is_student(self):
        return self is UserRole.STUDENT

    @property
    def is_lecturer(self):
        """Every role other than student is a lecturer variant."""
        return self in LECTURER_ROLES


LECTURER_ROLES = frozenset({
    UserRole.LECTURER,
    UserRole.PRIMARY_LECTURER,
    UserRole.SECONDARY_LECTURER,
})


class User(UserMixin, db.Model):
    """
    User model for caller identity.

    Extends UserMixin for Flask-Login integration. Credentials are issued
    elsewhere; this service only resolves the user a token points to.

    Attributes:
        id: Primary key (UUID string)
        role: UserRole
        identifier: NIM for students, NIP for lecturers
        student_id: Linked Student profile (students only)
        lecturer_id: Linked Lecturer profile (lecturer roles only)
    """
    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    identifier = db.Column(db.String(32), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, index=True)
    role = db.Column(db.Enum(UserRole), nullable=False, default=UserRole.STUDENT, index=True)
    active = db.Column(db.Boolean, nullable=False, default=True)

    # Profile links
    student_id = db.Column(
        db.String(36),
        db.ForeignKey('students.id', ondelete='SET NULL'),
        nullable=True,
        unique=True
    )
    lecturer_id = db.Column(
        db.String(36),
        db.ForeignKey('lecturers.id', ondelete='SET NULL'),
        nullable=True,
        unique=True
    )

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    student = db.relationship('Student', backref=db.backref('user', uselist=False))
    lecturer = db.relationship('Lecturer', backref=db.backref('user', uselist=False))

    def __repr__(self):
        return f'<User {self.identifier} ({self.role.value})>'

    @property
    def is_active(self):
        """Flask-Login hook; deactivated users cannot authenticate."""
        return bool(self.active)

    def is_student(self):
        """Check if user is a student."""
        return self.role.is_student

    def is_lecturer(self):
        """Check if user has any lecturer role."""
        return self.role.is_lecturer

    @property
    def profile(self):
        """The Student or Lecturer profile matching the role."""
        if self.role.is_student:
            return self.student
        return self.lecturer

    @property
    def name(self):
        """Display name from the linked profile."""
        profile = self.profile
        return profile.name if profile else None
