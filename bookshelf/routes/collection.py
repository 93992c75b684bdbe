from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import IntegrityError
from bookshelf.schemas import CollectionCreate
from bookshelf.utils import is_login, check_csrf, unauthorized, unexpected_error, get_collection_store

collection_bp = Blueprint('collection', __name__)

@collection_bp.route('', methods=['GET'])
def get_collections():
    """List all collections, or only those of ?userId="""
    try:
        store = get_collection_store()
        user_id = request.args.get('userId')

        if user_id:
            collection = store.find_collections(user_id=int(user_id))

            return jsonify({
                'collection': [c.to_dict() for c in collection]
            }), 200

        collections = store.find_collections(expand=True)

        return jsonify({
            'collections': [c.to_dict(expand=True) for c in collections]
        }), 200

    except Exception as e:
        current_app.logger.error(f'Error getting collections: {str(e)}')
        return unexpected_error()

@collection_bp.route('', methods=['POST'])
def create_collection():
    """Save a book to a user's collection"""
    if not is_login():
        return unauthorized()
    check_csrf()

    store = get_collection_store()
    try:
        data = CollectionCreate.model_validate(request.get_json(silent=True))
        user_id, book_id = data.user_id, data.book_id

        user = store.find_user(user_id)
        if not user:
            return jsonify({'error': 'User not found.'}), 404

        book = store.find_book(book_id)
        if not book:
            return jsonify({'error': 'Book not found.'}), 404

        existing_collection = store.find_first_collection(user_id, book_id)
        if existing_collection:
            return jsonify({'error': 'Collection already exists.'}), 400

        try:
            collection = store.create_collection(user_id, book_id)
        except IntegrityError as e:
            store.rollback()
            # Only a concurrent insert of the same pair counts as a duplicate
            if not store.find_first_collection(user_id, book_id):
                raise
            current_app.logger.warning(
                f'Duplicate collection rejected by database for user {user_id}, book {book_id}: {str(e.orig)}'
            )
            return jsonify({'error': 'Collection already exists.'}), 400

        current_app.logger.info(f'Collection {collection.id} created for user {user_id}, book {book_id}')
        return jsonify({
            'collection': collection.to_dict()
        }), 201

    except Exception as e:
        store.rollback()
        current_app.logger.error(f'Error creating collection: {str(e)}')
        return unexpected_error(e)

@collection_bp.route('', methods=['DELETE'])
def delete_collection():
    """Remove a collection by ?id="""
    if not is_login():
        return unauthorized()
    check_csrf()

    store = get_collection_store()
    try:
        collection_id = int(request.args.get('id') or 0)

        collection = store.find_collection(collection_id)
        if not collection:
            return jsonify({'error': 'Collection not found.'}), 404

        store.delete_collection(collection)

        current_app.logger.info(f'Collection {collection_id} deleted')
        return jsonify({
            'success': True,
            'message': 'collection deleted.'
        }), 200

    except Exception as e:
        store.rollback()
        current_app.logger.error(f'Error deleting collection: {str(e)}')
        return unexpected_error()
