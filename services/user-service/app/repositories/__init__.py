"""
Repository layer - Data access abstractions.

This layer provides the user lookup interface and its in-memory
implementation, hiding storage details from the business logic.
"""
