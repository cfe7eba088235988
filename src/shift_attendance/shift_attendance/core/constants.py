"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Asia/Kolkata"

# Check-in admission window, relative to shift start.
EARLY_CHECKIN_MINUTES = 60
LATE_CHECKIN_CUTOFF_MINUTES = 300
LATE_GRACE_MINUTES = 15

# Salary-summary view.
DAILY_WAGE = 300
OVERTIME_RATE = 10

# Monthly payroll view (not reconciled with the salary summary).
HOURLY_RATE = 100
OVERTIME_HOURLY_RATE = 50
