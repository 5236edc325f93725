"""
Application factory module.

Implements the Flask application factory pattern for creating app instances.
This pattern allows:
- Multiple app instances with different configurations
- Better testing capabilities
- Lazy initialization of extensions
- Clean blueprint registration
"""

import os
from flask import Flask
from werkzeug.exceptions import HTTPException

from config import config


def create_app(config_name=None):
    """
    Application factory function.

    Args:
        config_name: Configuration to use ('development', 'testing', 'production')
                    Defaults to FLASK_CONFIG env variable or 'development'

    Returns:
        Flask application instance
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    # Create Flask application instance
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # Initialize extensions
    _init_extensions(app)

    # Register blueprints
    _register_blueprints(app)

    # Register error handlers
    _register_error_handlers(app)

    # Register shell context
    _register_shell_context(app)

    return app


def _init_extensions(app):
    """Initialize Flask extensions with the app instance."""
    from supervision.extensions import db, migrate, login_manager
    from supervision.errors import AuthenticationError
    from supervision.identity import load_user, load_user_from_request

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # Callers are identified per request by their bearer token
    login_manager.user_loader(load_user)
    login_manager.request_loader(load_user_from_request)

    @login_manager.unauthorized_handler
    def unauthorized():
        raise AuthenticationError('missing bearer token')


def _register_blueprints(app):
    """Register all application blueprints."""
    from supervision.blueprints.schedule import schedule_bp
    from supervision.blueprints.thesis import thesis_bp

    app.register_blueprint(schedule_bp, url_prefix='/api/v1/schedules')
    app.register_blueprint(thesis_bp, url_prefix='/api/v1/theses')


def _register_error_handlers(app):
    """Register JSON error handlers."""
    from supervision.errors import ServiceError
    from supervision.extensions import db
    from supervision.responses import build_response_failed

    @app.errorhandler(ServiceError)
    def service_error(error):
        return build_response_failed(error.message, error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(error):
        return build_response_failed(error.name.lower(), error.description), error.code

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        app.logger.error(f'Unhandled error: {getattr(error, "original_exception", error)}')
        return build_response_failed('internal server error'), 500


def _register_shell_context(app):
    """Register shell context for flask shell command."""
    from supervision.extensions import db
    from supervision.models import User, UserRole, Student, Lecturer, Thesis, Schedule

    @app.shell_context_processor
    def make_shell_context():
        return {
            'db': db,
            'User': User,
            'UserRole': UserRole,
            'Student': Student,
            'Lecturer': Lecturer,
            'Thesis': Thesis,
            'Schedule': Schedule
        }
