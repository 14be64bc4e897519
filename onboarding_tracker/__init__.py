"""
Employee onboarding tracker.

HR, IT and Admin users drive a fixed catalog of onboarding tasks per new
hire to completion; all state is kept in a JSON key-value store.
"""
