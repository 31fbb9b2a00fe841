"""
Utility functions module.

Time Semantics:
- Challenge dates are calendar dates in the user's local timezone
- Comparisons are made between timezone-aware datetimes; naive values are
  interpreted as local time
"""
