"""
Configuration module for the thesis supervision service.

Contains different configuration classes for development, testing, and production environments.
Uses environment variables for sensitive data in production.
"""

import os

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    """Base configuration class with common settings."""

    # Secret key for Flask internals
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # SQLAlchemy settings
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_RECORD_QUERIES = True

    # Bearer token verification (tokens are issued by the auth service)
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or 'dev-jwt-secret-change-in-production'
    JWT_ALGORITHM = os.environ.get('JWT_ALGORITHM') or 'HS256'
    JWT_USER_ID_CLAIM = 'user_id'

    # Forms are filled from JSON bodies of bearer-authenticated requests
    WTF_CSRF_ENABLED = False

    # Pagination
    ITEMS_PER_PAGE = 10
    MAX_ITEMS_PER_PAGE = 100

    # Allow a lecturer to overwrite an approved/rejected decision
    SCHEDULE_ALLOW_REDECISION = False

    @staticmethod
    def init_app(app):
        """Initialize application-specific settings."""
        pass


class DevelopmentConfig(Config):
    """Development configuration with debug enabled and SQLite database."""

    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'data-dev.sqlite')

    @staticmethod
    def init_app(app):
        Config.init_app(app)


class TestingConfig(Config):
    """Testing configuration with in-memory SQLite database."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('TEST_DATABASE_URL') or \
        'sqlite:///:memory:'
    SQLALCHEMY_RECORD_QUERIES = False
    JWT_SECRET_KEY = 'testing-jwt-secret'


class ProductionConfig(Config):
    """Production configuration with PostgreSQL database."""

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'postgresql://localhost/supervision'
    SQLALCHEMY_RECORD_QUERIES = False
    SCHEDULE_ALLOW_REDECISION = os.environ.get('SCHEDULE_ALLOW_REDECISION', '').lower() in ('1', 'true', 'yes')

    @staticmethod
    def init_app(app):
        Config.init_app(app)

        # Log to a rotating file in production
        import logging
        from logging.handlers import RotatingFileHandler

        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = RotatingFileHandler(
            'logs/supervision.log',
            maxBytes=10240000,
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.setLevel(logging.INFO)
        app.logger.info('Supervision service startup')


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
