"""
Domain layer - Core business entities and domain logic.

This layer contains the user entity and the errors raised when looking
users up, independent of any storage or framework concerns.
"""
