"""Dependency Injection Container Module.

Usage:
------
    from amplitude_mcp.core.config import Settings
    from amplitude_mcp.core.container import create_container

    container = create_container(Settings())

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container() (builds)
"""

from amplitude_mcp.core.container.container import Container
from amplitude_mcp.core.container.factory import create_container

__all__ = ["Container", "create_container"]
