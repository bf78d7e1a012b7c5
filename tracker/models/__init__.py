from .intern import Intern
from .activity import Activity

__all__ = [
    "Intern",
    "Activity",
]
