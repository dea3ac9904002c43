"""User domain entity."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Domain entity representing a user, identified by name."""
    
    name: str
    display_name: Optional[str] = None
    
    def __post_init__(self):
        """Validate user entity."""
        if not self.name:
            raise ValueError("name is required")
