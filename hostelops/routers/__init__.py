# hostelops/routers/__init__.py

# Import all router modules to make them available
from . import complaints
from . import announcements
from . import config

__all__ = [
    "complaints",
    "announcements",
    "config",
]
