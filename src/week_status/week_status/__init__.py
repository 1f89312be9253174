"""Attendance week status package.

Feature modules (schedules, attendance, excuses) describe the three sources,
``reconciliation`` turns their snapshots into one status per day, and ``week``
wires it to a thin Flask controller.
"""
