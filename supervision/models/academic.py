"""
Organizational affiliation models.

Students and lecturers belong to a study program, which belongs to a faculty.
"""

from datetime import datetime
from supervision.extensions import db
from supervision.models.user import generate_uuid


class Faculty(db.Model):
    """Faculty grouping several study programs."""
    __tablename__ = 'faculties'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    name = db.Column(db.String(128), unique=True, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    study_programs = db.relationship('StudyProgram', backref='faculty', lazy='dynamic')

    def __repr__(self):
        return f'<Faculty {self.name}>'


class StudyProgram(db.Model):
    """Study program offered by a faculty."""
    __tablename__ = 'study_programs'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    name = db.Column(db.String(128), nullable=False)
    faculty_id = db.Column(
        db.String(36),
        db.ForeignKey('faculties.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<StudyProgram {self.name}>'
