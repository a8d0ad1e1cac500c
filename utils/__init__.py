"""
utils package
-------------

Contains utility modules used throughout the roster service.

Includes helpers for loading configuration constants, date and clock-time arithmetic for shifts,
logging setup, and report-building helpers.
"""
