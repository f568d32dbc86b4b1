"""
User Service Package.

Looks users up by identifier through a repository abstraction.
"""

__version__ = "1.0.0"
__description__ = "User lookup service"
