"""
models/ - Domain Layer
======================
Plain value objects for authors and books. They carry no persistence logic;
repositories convert them to SQL parameters and back.
"""
