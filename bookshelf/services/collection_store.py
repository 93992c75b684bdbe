from typing import List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from bookshelf.models.book import Book
from bookshelf.models.collection import Collection
from bookshelf.models.user import User


class CollectionStore(Protocol):
    """Storage operations the collection resource depends on"""

    def find_user(self, user_id: int) -> Optional[User]:
        ...

    def find_book(self, book_id: int) -> Optional[Book]:
        ...

    def find_collection(self, collection_id: int) -> Optional[Collection]:
        ...

    def find_collections(self, user_id: Optional[int] = None, expand: bool = False) -> List[Collection]:
        """
        List collections, optionally only those of one user.

        Args:
            user_id (Optional[int]): restrict to this user's collections
            expand (bool): eager-load the related user and book
        """
        ...

    def find_first_collection(self, user_id: int, book_id: int) -> Optional[Collection]:
        ...

    def create_collection(self, user_id: int, book_id: int) -> Collection:
        """
        Insert and commit a new collection.

        Raises:
            sqlalchemy.exc.IntegrityError: the (user_id, book_id) pair already exists
        """
        ...

    def delete_collection(self, collection: Collection) -> None:
        ...

    def rollback(self) -> None:
        ...


class SQLAlchemyCollectionStore:
    """CollectionStore backed by a Flask-SQLAlchemy scoped session"""

    def __init__(self, session):
        self.session = session

    def find_user(self, user_id):
        return self.session.get(User, user_id)

    def find_book(self, book_id):
        return self.session.get(Book, book_id)

    def find_collection(self, collection_id):
        return self.session.get(Collection, collection_id)

    def find_collections(self, user_id=None, expand=False):
        query = select(Collection).order_by(Collection.id)

        if user_id is not None:
            query = query.where(Collection.user_id == user_id)

        if expand:
            query = query.options(
                joinedload(Collection.user),
                joinedload(Collection.book)
            )

        return self.session.execute(query).scalars().all()

    def find_first_collection(self, user_id, book_id):
        return self.session.execute(
            select(Collection).where(
                Collection.user_id == user_id,
                Collection.book_id == book_id
            )
        ).scalars().first()

    def create_collection(self, user_id, book_id):
        collection = Collection(user_id=user_id, book_id=book_id)
        self.session.add(collection)
        self.session.commit()
        return collection

    def delete_collection(self, collection):
        self.session.delete(collection)
        self.session.commit()

    def rollback(self):
        self.session.rollback()
