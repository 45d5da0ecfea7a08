"""
Domain Layer
============
Aggregates (house, room, device), value objects and the exception hierarchy.
"""
