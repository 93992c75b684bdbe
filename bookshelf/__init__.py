from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect, CSRFError
import logging
from logging.handlers import RotatingFileHandler

# Initialize extensions
db = SQLAlchemy()
login_manager = LoginManager()
csrf = CSRFProtect()

def create_app(config_name='default', collection_store=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    from config.config import config
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    csrf.init_app(app)

    # Storage used by the collection resource
    if collection_store is None:
        from bookshelf.services.collection_store import SQLAlchemyCollectionStore
        collection_store = SQLAlchemyCollectionStore(db.session)
    app.extensions['collection_store'] = collection_store

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from bookshelf.models.user import User
        return db.session.get(User, int(user_id))

    # JSON clients get a 401 instead of a redirect to a login page
    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'error': 'Unauthorized'}), 401

    # Register blueprints
    from bookshelf.routes.api import api_bp
    from bookshelf.routes.auth import auth_bp
    from bookshelf.routes.collection import collection_bp

    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(collection_bp, url_prefix='/api/collection')

    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(CSRFError)
    def csrf_error(error):
        return jsonify({'error': error.description}), 400

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return jsonify({'error': 'An unexpected error occurred.'}), 500

    # Setup logging
    if not app.debug and not app.testing:
        file_handler = RotatingFileHandler(
            app.config['LOG_FILE'],
            maxBytes=10240000,
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(app.config['LOG_LEVEL'])
        app.logger.addHandler(file_handler)

        app.logger.setLevel(app.config['LOG_LEVEL'])
        app.logger.info('Bookshelf collections service startup')

    return app
