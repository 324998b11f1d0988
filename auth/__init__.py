"""
Auth package for the Course Platform API.

Provides HTTP Basic Auth backed by the user store: bcrypt password hashing,
credential verification, and FastAPI dependencies that resolve the
current user.
"""
