"""
Domain Layer

Core domain types that are independent of persistence and transport.

Structure:
- value_objects/: enum-like values stored on the models (UserRole, GoodType)
"""
