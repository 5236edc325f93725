"""
Flask extensions module.

Extensions are created without the app instance (factory pattern)
and bound to the app later in create_app().
"""

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager

# Database ORM - the storage collaborator behind the repositories
db = SQLAlchemy()

# Database migrations - tracks schema changes
migrate = Migrate()

# Caller identity - users are loaded per request from the bearer token
login_manager = LoginManager()
login_manager.session_protection = None
