"""
Schedule model for proposed supervision sessions.

A schedule starts pending and is decided once by a supervising lecturer:
    pending -> approved
    pending -> rejected
The approver is recorded together with the decision and only then.
"""

from datetime import datetime
from enum import Enum
from supervision.extensions import db
from supervision.models.user import generate_uuid


class ScheduleStatus(Enum):
    """Enumeration for schedule status."""
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'

    @property
    def is_terminal(self):
        """Check if this is a decision status."""
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({ScheduleStatus.APPROVED, ScheduleStatus.REJECTED})


class Schedule(db.Model):
    """
    Proposed supervision session for a thesis.

    Attributes:
        id: Primary key
        proposed_at: When the session was proposed
        start_time: Proposed start of the session
        end_time: Proposed end of the session
        status: ScheduleStatus
        description: Short agenda (optional)
        location: Room or meeting link (optional)
        thesis_id: Thesis the session is about
        created_by_id: User who proposed the session
        approved_by_id: Lecturer user who decided it (set only when decided)
    """
    __tablename__ = 'schedules'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    proposed_at = db.Column(db.DateTime, nullable=False)
    start_time = db.Column(db.DateTime, nullable=False)
    end_time = db.Column(db.DateTime, nullable=False)
    status = db.Column(
        db.Enum(ScheduleStatus),
        nullable=False,
        default=ScheduleStatus.PENDING,
        index=True
    )
    description = db.Column(db.Text)
    location = db.Column(db.String(255))

    thesis_id = db.Column(
        db.String(36),
        db.ForeignKey('theses.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    created_by_id = db.Column(
        db.String(36),
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    approved_by_id = db.Column(
        db.String(36),
        db.ForeignKey('users.id', ondelete='SET NULL'),
        nullable=True,
        index=True
    )

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    thesis = db.relationship('Thesis', backref=db.backref('schedules', lazy='dynamic',
                                                         cascade='all, delete-orphan'))
    created_by = db.relationship('User', foreign_keys=[created_by_id], backref='created_schedules')
    approved_by = db.relationship('User', foreign_keys=[approved_by_id], backref='approved_schedules')

    def __repr__(self):
        return f'<Schedule {self.id} ({self.status.value})>'

    @property
    def is_pending(self):
        """Check if the schedule still awaits a decision."""
        return self.status == ScheduleStatus.PENDING

    @property
    def is_decided(self):
        """Check if the schedule has been approved or rejected."""
        return self.status.is_terminal
