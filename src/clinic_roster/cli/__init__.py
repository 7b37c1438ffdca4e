"""CLI module.

This module provides the clinic-roster command-line interface.
"""
