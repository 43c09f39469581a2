"""Acme Talent API: users, skills and user-skill assignments."""

__version__ = "0.1.0"
