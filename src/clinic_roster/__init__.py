"""Clinic Roster - patient roster model for a clinic.

Provides polymorphic patient records, the clinic roster container that owns
them, and a line-oriented export format.
"""

__version__ = "0.1.0"
