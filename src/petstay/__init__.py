"""PetStay: hamster boarding website and reservation request server."""

__version__ = "0.1.0"
