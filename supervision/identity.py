"""
Caller identity resolution.

Bearer tokens are issued by the authentication service; this module only
verifies them and maps the user id claim to a User record. Flask-Login calls
load_user_from_request() for every request hitting a login_required view.
"""

from flask import current_app
from jose import JWTError, jwt
from sqlalchemy.orm import joinedload

from supervision.errors import AuthenticationError, NotFoundError
from supervision.extensions import db
from supervision.models.user import User


def bearer_token(request):
    """Extract the token from an 'Authorization: Bearer <token>' header."""
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def user_id_from_token(token):
    """
    Verify a token and return the user id it carries.

    Raises:
        AuthenticationError: Token is invalid, expired, or lacks the claim.
    """
    try:
        claims = jwt.decode(
            token,
            current_app.config['JWT_SECRET_KEY'],
            algorithms=[current_app.config['JWT_ALGORITHM']]
        )
    except JWTError as exc:
        current_app.logger.warning(f'Rejected bearer token: {exc}')
        raise AuthenticationError('invalid or expired token') from exc

    user_id = claims.get(current_app.config['JWT_USER_ID_CLAIM'])
    if not user_id:
        current_app.logger.warning('Bearer token has no user id claim')
        raise AuthenticationError('token does not identify a user')
    return str(user_id)


def resolve_caller(credential):
    """
    Resolve a bearer credential to the calling User.

    The user's Student or Lecturer profile is loaded along with it.

    Raises:
        AuthenticationError: Credential cannot be mapped to a user id, or
            the account is deactivated.
        NotFoundError: No user record exists for the id.
    """
    if not credential:
        raise AuthenticationError('missing bearer token')

    user_id = user_id_from_token(credential)
    user = User.query.options(
        joinedload(User.student),
        joinedload(User.lecturer)
    ).filter_by(id=user_id).first()

    if user is None:
        current_app.logger.warning(f'User not found for token subject {user_id}')
        raise NotFoundError('user not found')
    if not user.is_active:
        current_app.logger.warning(f'Deactivated user {user_id} presented a token')
        raise AuthenticationError('account is deactivated')
    return user


def load_user_from_request(request):
    """Flask-Login request loader; no Authorization header means anonymous."""
    token = bearer_token(request)
    if token is None:
        return None
    return resolve_caller(token)


def load_user(user_id):
    """Flask-Login user loader by primary key."""
    return db.session.get(User, user_id)
