"""
Store access package.

Repositories wrap the ORM session behind plain functions. Each write
commits on its own; any SQLAlchemy failure is rolled back and surfaced
as a StorageError.

Reads take an explicit ``expand`` tuple naming the relations to eager-load,
so every query states the graph it fetches.
"""

from functools import wraps
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from supervision.errors import StorageError, ValidationError
from supervision.extensions import db

# Largest OFFSET the database drivers accept
MAX_OFFSET = 2 ** 63 - 1


def storage_operation(action):
    """
    Decorator translating SQLAlchemy failures into StorageError.

    Args:
        action: Short description used in the log line and error message.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except SQLAlchemyError as exc:
                db.session.rollback()
                current_app.logger.error(f'Failed to {action}: {exc}')
                raise StorageError(f'failed to {action}') from exc
        return decorated_function
    return decorator


def loader_options(expansions, expand):
    """
    Build ORM loader options for the requested expansions.

    Args:
        expansions: Mapping of expansion name to a callable returning options.
        expand: Iterable of expansion names.

    Raises:
        ValueError: An expansion name is not known to the repository.
    """
    options = []
    for name in expand:
        try:
            factory = expansions[name]
        except KeyError:
            raise ValueError(f'Unknown expansion: {name!r}') from None
        options.extend(factory())
    return options


def normalize_pagination(page, per_page):
    """
    Apply pagination defaults and bounds.

    A missing or zero page means the first page; a missing or zero per_page
    means ITEMS_PER_PAGE. per_page is capped at MAX_ITEMS_PER_PAGE.

    Raises:
        ValidationError: page or per_page is negative, or the page starts
            beyond MAX_OFFSET.
    """
    page = page or 1
    per_page = per_page or current_app.config['ITEMS_PER_PAGE']
    if page < 1 or per_page < 1:
        raise ValidationError('page and per_page must be positive integers')
    per_page = min(per_page, current_app.config['MAX_ITEMS_PER_PAGE'])
    if (page - 1) * per_page > MAX_OFFSET:
        raise ValidationError('page is out of range')
    return page, per_page
