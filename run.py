"""
Application entry point.

This script creates and runs the Flask application.
It handles loading environment variables and provides
CLI commands for database management.

Usage:
    Development: python run.py
    Production:  gunicorn -w 4 -b 0.0.0.0:8000 "run:app"
"""

import os
import click
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from supervision import create_app
from supervision.extensions import db
from supervision.models import (
    Faculty, StudyProgram, Student, Lecturer, Thesis, ThesisProgress, User, UserRole
)

# Create application instance
app = create_app(os.getenv('FLASK_CONFIG', 'development'))


@app.cli.command('init-db')
def init_db():
    """Initialize the database tables."""
    click.echo('Creating database tables...')
    db.create_all()
    click.echo('Database initialization complete!')


@app.cli.command('seed-demo')
def seed_demo():
    """Seed the database with demo data for development."""
    click.echo('Seeding demo data...')

    if Faculty.query.filter_by(name='Faculty of Computer Science').first():
        click.echo('Demo data already present.')
        return

    faculty = Faculty(name='Faculty of Computer Science')
    program = StudyProgram(name='Informatics', faculty=faculty)
    db.session.add_all([faculty, program])

    # Demo lecturers
    lecturers = []
    for i, role in enumerate((UserRole.PRIMARY_LECTURER, UserRole.SECONDARY_LECTURER), start=1):
        lecturer = Lecturer(nip=f'19800101200{i}011001', name=f'Lecturer Demo{i}', study_program=program)
        db.session.add(User(identifier=lecturer.nip, email=f'lecturer{i}@supervision.local',
                            role=role, lecturer=lecturer))
        lecturers.append((lecturer, role))
    click.echo('Demo lecturers created.')

    # Demo student with an active thesis supervised by both lecturers
    student = Student(nim='5025201001', name='Student Demo', study_program=program)
    db.session.add(User(identifier=student.nim, email='student@supervision.local',
                        role=UserRole.STUDENT, student=student))
    thesis = Thesis(
        title='Scheduling Supervision Sessions with Constraint Solving',
        description='Demo thesis for development.',
        progress=ThesisProgress.BAB1,
        student=student
    )
    for lecturer, role in lecturers:
        thesis.add_supervisor(lecturer, role)
    db.session.add(thesis)
    db.session.commit()
    click.echo('Demo student and thesis created.')

    click.echo('Demo data seeding complete!')


@app.cli.command('drop-all')
@click.confirmation_option(prompt='Are you sure you want to drop all tables?')
def drop_all():
    """Drop all database tables."""
    db.drop_all()
    click.echo('All tables dropped.')


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
