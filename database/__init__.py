"""
Food Ordering - Database module.

This module contains the seed data and seeding scripts for the Appwrite
database backing the mobile app.
"""
