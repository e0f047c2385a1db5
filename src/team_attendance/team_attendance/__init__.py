"""Team Attendance engine package.

Feature modules (seasons, events, membership, attendance, ...) hold pure
calculation code plus thin service layers that read through repository
protocols supplied by the caller.
"""
