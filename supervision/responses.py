"""
JSON response envelope helpers.

Success: {"success": true, "message": ..., "data": ..., "meta": ...}
Failure: {"success": false, "message": ..., "error": ...}
"""

from flask import jsonify

from supervision.errors import ValidationError


def build_response_success(message, data=None, meta=None):
    """Build a success envelope; meta is included for list responses."""
    body = {
        'success': True,
        'message': message,
        'data': data
    }
    if meta is not None:
        body['meta'] = meta
    return jsonify(body)


def build_response_failed(message, error=None):
    """Build a failure envelope."""
    return jsonify({
        'success': False,
        'message': message,
        'error': error
    })


def form_validation_error(form):
    """Turn WTForms field errors into a ValidationError."""
    return ValidationError('invalid request body', details=form.errors)


def require_json_object(request):
    """
    Check that the request body is a JSON object before a form reads it.

    Raises:
        ValidationError: The body is missing, not JSON, or not an object.
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError('request body must be a JSON object')
    return body


def _int_arg(request, name):
    value = request.args.get(name, '')
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f'{name} must be an integer') from None


def pagination_args(request):
    """
    Read page and per_page query parameters (missing or 0 means default).

    Raises:
        ValidationError: A parameter is not an integer.
    """
    return _int_arg(request, 'page'), _int_arg(request, 'per_page')
