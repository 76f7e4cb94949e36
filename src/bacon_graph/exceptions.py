"""
Custom exceptions for the bacon_graph package.
"""

class BaconGraphException(Exception):
    """Base exception for the package."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ReferenceActorNotFoundException(BaconGraphException):
    """Raised when the reference actor is missing from the loaded data."""
    def __init__(self, reference_actor: str):
        self.reference_actor = reference_actor
        super().__init__(f"{reference_actor} was not found")
