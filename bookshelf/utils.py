from flask import current_app, jsonify
from flask_login import current_user
from bookshelf import csrf

UNEXPECTED_ERROR = 'An unexpected error occurred.'

def is_login():
    """Check whether the current request carries an authenticated session"""
    return current_user.is_authenticated

def check_csrf():
    """Validate the CSRF token of a write request.

    Called by views after their login check, so anonymous callers get a 401
    rather than a CSRF failure. Raises CSRFError on a missing or bad token.
    """
    if current_app.config.get('WTF_CSRF_ENABLED'):
        csrf.protect()

def unauthorized():
    """401 response for write endpoints called without a session"""
    return jsonify({'error': 'Unauthorized'}), 401

def unexpected_error(error=None):
    """Generic 500 response.

    The exception text is only echoed back when EXPOSE_ERROR_DETAILS is on.
    """
    body = {'error': UNEXPECTED_ERROR}
    if error is not None and current_app.config.get('EXPOSE_ERROR_DETAILS'):
        body['message'] = str(error)
    return jsonify(body), 500

def get_collection_store():
    """Storage configured for the collection resource of the current app"""
    return current_app.extensions['collection_store']
