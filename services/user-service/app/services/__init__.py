"""
Service layer - Business operations over repositories.
"""
