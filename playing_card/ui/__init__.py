"""User interfaces for the playing card package."""
