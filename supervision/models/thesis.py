"""
Thesis models.

A thesis belongs to one student and is supervised by an ordered list of
lecturers. Progress moves freely between the enumerated stages.
"""

from datetime import datetime
from enum import Enum
from supervision.extensions import db
from supervision.models.user import UserRole, generate_uuid


class ThesisProgress(Enum):
    """Enumeration for thesis milestone stages."""
    BAB1 = 'bab1'
    BAB2 = 'bab2'
    BAB3 = 'bab3'
    BAB4 = 'bab4'
    BAB5 = 'bab5'
    SEMINAR_PROPOSAL = 'seminar_proposal'
    SEMINAR_HASIL = 'seminar_hasil'


class Thesis(db.Model):
    """
    Thesis aggregate.

    Attributes:
        id: Primary key
        title: Thesis title
        description: Abstract or summary
        progress: Current ThesisProgress stage
        is_active: Whether this is the student's current thesis
        student_id: Owning student
        supervisors: ThesisSupervisor entries ordered by position
    """
    __tablename__ = 'theses'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    progress = db.Column(
        db.Enum(ThesisProgress),
        nullable=False,
        default=ThesisProgress.BAB1
    )
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

    student_id = db.Column(
        db.String(36),
        db.ForeignKey('students.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    supervisors = db.relationship(
        'ThesisSupervisor',
        back_populates='thesis',
        order_by='ThesisSupervisor.position',
        cascade='all, delete-orphan'
    )

    def __repr__(self):
        return f'<Thesis {self.title} ({self.progress.value})>'

    def is_supervised_by(self, lecturer_id):
        """Check if a lecturer profile is among the supervisors."""
        return any(s.lecturer_id == lecturer_id for s in self.supervisors)

    def add_supervisor(self, lecturer, role=UserRole.PRIMARY_LECTURER):
        """Append a lecturer to the supervisor list."""
        supervisor = ThesisSupervisor(
            lecturer=lecturer,
            role=role,
            position=len(self.supervisors)
        )
        self.supervisors.append(supervisor)
        return supervisor


class ThesisSupervisor(db.Model):
    """
    Supervisor assignment of a lecturer to a thesis.

    A lecturer appears at most once per thesis. Position orders the
    supervisors (0 is usually the primary supervisor).
    """
    __tablename__ = 'thesis_supervisors'

    thesis_id = db.Column(
        db.String(36),
        db.ForeignKey('theses.id', ondelete='CASCADE'),
        primary_key=True
    )
    lecturer_id = db.Column(
        db.String(36),
        db.ForeignKey('lecturers.id', ondelete='CASCADE'),
        primary_key=True,
        index=True
    )
    role = db.Column(
        db.Enum(UserRole),
        nullable=False,
        default=UserRole.PRIMARY_LECTURER
    )
    position = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    thesis = db.relationship('Thesis', back_populates='supervisors')
    lecturer = db.relationship('Lecturer', back_populates='supervisions')

    def __repr__(self):
        return f'<ThesisSupervisor {self.lecturer_id} on {self.thesis_id}>'
