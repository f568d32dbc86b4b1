"""
Root conftest.py for the user service repository.

Makes each service's ``app`` package importable when pytest runs from the
repository root.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Add service directories to sys.path.

    Each service keeps its code in ``services/<name>/app``, so the service
    directory itself must be on the path for ``import app`` to work.
    """
    root_dir = Path(__file__).parent

    for service_path in sorted((root_dir / "services").iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))
