"""Directory — the owning collection of contact entries.

The directory provides:
- Validation: names are checked and canonicalized on insert
- Lookup: case-insensitive access by name
- Listing: alphabetically sorted display names
"""
