from flask import Blueprint, jsonify
from sqlalchemy import text
from bookshelf import db
from datetime import datetime

api_bp = Blueprint('api', __name__)

@api_bp.route('/health')
def health_check():
    """API health check endpoint"""
    try:
        # Test database connection
        db.session.execute(text('SELECT 1'))

        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.utcnow().isoformat(),
            'service': 'Bookshelf Collections API',
            'version': '1.0.0'
        })
    except Exception as e:
        return jsonify({
            'status': 'unhealthy',
            'error': str(e),
            'timestamp': datetime.utcnow().isoformat(),
            'service': 'Bookshelf Collections API'
        }), 500

