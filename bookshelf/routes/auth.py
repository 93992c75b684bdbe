from flask import Blueprint, request, jsonify, current_app
from flask_login import login_user, logout_user, login_required, current_user
from flask_wtf.csrf import generate_csrf
from pydantic import ValidationError
from bookshelf import db
from bookshelf.models.user import User
from bookshelf.schemas import LoginRequest
from bookshelf.utils import check_csrf

auth_bp = Blueprint('auth', __name__)

@auth_bp.route('/login', methods=['POST'])
def login():
    """Start a session for a user"""
    check_csrf()
    try:
        credentials = LoginRequest.model_validate(request.get_json(silent=True))
    except ValidationError as e:
        return jsonify({
            'error': 'Please provide both username and password.',
            'details': e.errors(include_url=False, include_context=False, include_input=False)
        }), 400

    # Find user by username or email
    user = User.query.filter(
        db.or_(
            User.username == credentials.username,
            User.email == credentials.username
        )
    ).first()

    if not user or not user.check_password(credentials.password) or not user.is_active:
        current_app.logger.warning(f'Failed login attempt for {credentials.username}')
        return jsonify({'error': 'Invalid username or password.'}), 401

    login_user(user, remember=credentials.remember)
    user.update_last_login()

    return jsonify({
        'success': True,
        'user': user.to_dict()
    }), 200

@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """End the current session"""
    check_csrf()
    logout_user()
    return jsonify({'success': True}), 200

@auth_bp.route('/me')
@login_required
def me():
    """Current user profile"""
    return jsonify({'user': current_user.to_dict()})

@auth_bp.route('/csrf')
def csrf_token():
    """CSRF token for clients that send write requests"""
    return jsonify({'csrfToken': generate_csrf()})
