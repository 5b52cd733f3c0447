"""User domain module.

This domain manages user accounts, their preferences, and the single active
session token stored for each user.
"""
