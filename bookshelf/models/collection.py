from bookshelf import db
from datetime import datetime

class Collection(db.Model):
    """A book saved by a user"""
    __tablename__ = 'collections'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'book_id', name='uq_collection_user_book'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    book_id = db.Column(db.Integer, db.ForeignKey('books.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship('User', back_populates='collections')
    book = db.relationship('Book', back_populates='collections')

    def to_dict(self, expand=False):
        """Convert to dictionary for API responses.

        With ``expand`` the owning user (public fields only) and the full
        book record are embedded.
        """
        data = {
            'id': self.id,
            'userId': self.user_id,
            'bookId': self.book_id,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

        if expand:
            data.update({
                'user': self.user.to_public_dict() if self.user else None,
                'book': self.book.to_dict() if self.book else None
            })

        return data

    def __repr__(self):
        return f'<Collection user={self.user_id} book={self.book_id}>'
