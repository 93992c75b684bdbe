#!/usr/bin/env python3
"""
Bookshelf Collections
A small library service where users save books to their personal collection.
"""

import os
import click
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from bookshelf import create_app, db
from bookshelf.models.user import User
from bookshelf.models.book import Book
from bookshelf.models.collection import Collection

# Create Flask application
app = create_app(os.getenv('FLASK_CONFIG') or 'default')

@app.shell_context_processor
def make_shell_context():
    """Make database models available in Flask shell"""
    return {
        'db': db,
        'User': User,
        'Book': Book,
        'Collection': Collection
    }

@app.cli.command()
def init_db():
    """Create database tables"""
    click.echo("Creating database tables...")
    db.create_all()
    click.echo("Database initialized successfully!")

@app.cli.command()
@click.option('--username', prompt=True)
@click.option('--email', prompt=True)
@click.option('--name', prompt=True, default='')
@click.password_option()
def create_user(username, email, name, password):
    """Create a user account"""
    if User.query.filter_by(username=username).first():
        click.echo(f"User {username} already exists!")
        return

    if User.query.filter_by(email=email).first():
        click.echo(f"Email {email} already registered!")
        return

    user = User(username=username, email=email, name=name or None, is_active=True)
    user.set_password(password)

    db.session.add(user)
    db.session.commit()

    click.echo(f"User {username} created successfully!")

@app.cli.command()
def sample_data():
    """Add sample users, books and collections for testing"""
    click.echo("Adding sample data...")

    sample_users = [
        {'username': 'reader', 'email': 'reader@example.com', 'name': 'Avid Reader'},
        {'username': 'librarian', 'email': 'librarian@example.com', 'name': 'Head Librarian'}
    ]

    for user_data in sample_users:
        if not User.query.filter_by(username=user_data['username']).first():
            user = User(**user_data)
            user.set_password('password123')
            db.session.add(user)

    sample_books = [
        {
            'title': 'Introduction to Computer Science',
            'author': 'Dr. Jane Smith',
            'isbn': '978-0123456789',
            'publisher': 'Education Press',
            'publication_year': 2023,
            'description': 'A comprehensive guide to computer science fundamentals for beginners.'
        },
        {
            'title': 'Digital Literacy for Everyone',
            'author': 'Mary Johnson',
            'isbn': '978-0987654321',
            'publisher': 'Tech Publications',
            'publication_year': 2022,
            'description': 'Essential digital skills for the modern world.'
        },
        {
            'title': 'Folk Tales of the Mountains',
            'author': 'Traditional Stories',
            'publisher': 'Local Heritage Press',
            'publication_year': 2021,
            'description': 'Collection of traditional stories and folklore.'
        }
    ]

    for book_data in sample_books:
        if not Book.query.filter_by(title=book_data['title']).first():
            db.session.add(Book(**book_data))

    db.session.commit()

    reader = User.query.filter_by(username='reader').first()
    first_book = Book.query.order_by(Book.id).first()
    if reader and first_book and not Collection.query.filter_by(user_id=reader.id, book_id=first_book.id).first():
        db.session.add(Collection(user_id=reader.id, book_id=first_book.id))
        db.session.commit()

    click.echo("Sample data added successfully!")

if __name__ == '__main__':
    # For development only
    run_host = os.getenv('FLASK_RUN_HOST', '127.0.0.1')
    run_port = int(os.getenv('FLASK_RUN_PORT', '8080'))
    run_debug = os.getenv('FLASK_DEBUG', 'True').lower() in ('1', 'true', 'yes')
    print(f"Running on {run_host}:{run_port} (debug={run_debug})")
    app.run(host=run_host, port=run_port, debug=run_debug)
