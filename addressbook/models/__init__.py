"""Contact data models — entries, birthdays, and name canonicalization."""
