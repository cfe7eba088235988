"""Shift Attendance package.

Feature modules (shifts, users, attendance, leaves, payroll, absentees, ...)
sit behind a thin Flask controller layer; business rules live in the
service/repository layers.
"""
