import os
from datetime import timedelta

BASE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..')

class Config:
    """Base configuration class"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'bookshelf-collections-secret-key'

    # Database configuration
    MYSQL_HOST = os.environ.get('MYSQL_HOST') or 'localhost'
    MYSQL_USER = os.environ.get('MYSQL_USER') or 'bookshelf_user'
    MYSQL_PASSWORD = os.environ.get('MYSQL_PASSWORD') or 'bookshelf_password'
    MYSQL_DB = os.environ.get('MYSQL_DB') or 'bookshelf'
    MYSQL_PORT = int(os.environ.get('MYSQL_PORT', 3306))

    # SQLAlchemy configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get("SQLALCHEMY_DATABASE_URI") or f"mysql+pymysql://{MYSQL_USER}:{MYSQL_PASSWORD}@{MYSQL_HOST}:{MYSQL_PORT}/{MYSQL_DB}"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,  # Recycle connections every hour
        'pool_pre_ping': True,  # Verify connections before use
        'pool_timeout': 30,
        'max_overflow': 10
    }

    # Session configuration
    PERMANENT_SESSION_LIFETIME = timedelta(hours=8)
    SESSION_COOKIE_SECURE = False  # Set to True in production with HTTPS
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Security settings
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour
    # Views call check_csrf() themselves, after authentication
    WTF_CSRF_CHECK_DEFAULT = False

    # Include raw exception text in 500 responses of write endpoints
    EXPOSE_ERROR_DETAILS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE') or os.path.join(BASE_DIR, 'logs', 'bookshelf.log')

    @staticmethod
    def init_app(app):
        """Initialize application with configuration"""
        # Create logs directory
        os.makedirs(os.path.dirname(app.config['LOG_FILE']), exist_ok=True)

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    EXPOSE_ERROR_DETAILS = True

    # Use SQLite for easier development setup
    SQLALCHEMY_DATABASE_URI = os.environ.get("SQLALCHEMY_DATABASE_URI") or 'sqlite:///' + os.path.join(BASE_DIR, 'instance', 'bookshelf.db')

    # Simplified engine options for SQLite
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_timeout': 30
    }

    @staticmethod
    def init_app(app):
        Config.init_app(app)
        os.makedirs(os.path.join(BASE_DIR, 'instance'), exist_ok=True)

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True

    # Enhanced security for production
    WTF_CSRF_SSL_STRICT = True

    # Production database with connection pooling
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 20,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
        'pool_timeout': 30,
        'max_overflow': 30
    }

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    WTF_CSRF_ENABLED = False
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}

    @staticmethod
    def init_app(app):
        pass

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
