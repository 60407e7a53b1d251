"""Attendance Dashboard package.

Organized by feature modules (records, summary, dashboard, settings) with a
thin Flask controller layer over plain service functions.
"""
