"""Library System - Core Application Package

This package contains the core application modules including:
- Book and user models (book.py, user.py)
- Catalog and membership collections (catalog.py, membership.py)
- Borrow/return workflow (library.py)
- CLI interface (main.py)
"""
