"""
Lecturer model for thesis supervisors.

Lecturers are linked to User accounts and supervise theses through
ThesisSupervisor assignments.
"""

from datetime import datetime
from supervision.extensions import db
from supervision.models.user import generate_uuid


class Lecturer(db.Model):
    """
    Lecturer profile model.

    Attributes:
        id: Primary key
        nip: Staff number (unique)
        name: Full name
        study_program_id: Home study program
    """
    __tablename__ = 'lecturers'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    nip = db.Column(db.String(30), unique=True, nullable=False, index=True)
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
    supervisions = db.relationship('ThesisSupervisor', back_populates='lecturer', lazy='dynamic')

    def __repr__(self):
        return f'<Lecturer {self.name} ({self.nip})>'
