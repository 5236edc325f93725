"""
Student model for thesis owners.
"""

from datetime import datetime
from supervision.extensions import db
from supervision.models.user import generate_uuid


class Student(db.Model):
    """
    Student profile.

    Attributes:
        id: Primary key
        nim: Student number (unique)
        name: Full name
        study_program_id: Study program the student is enrolled in
    """
    __tablename__ = 'students'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    nim = db.Column(db.String(20), unique=True, nullable=False, index=True)
    name = db.Column(db.String(128), nullable=False)
    study_program_id = db.Column(
        db.String(36),
        db.ForeignKey('study_programs.id', ondelete='SET NULL'),
        nullable=True,
        index=True
    )

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    study_program = db.relationship('StudyProgram')
    theses = db.relationship('Thesis', backref='student', lazy='dynamic',
                             cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Student {self.name} ({self.nim})>'
