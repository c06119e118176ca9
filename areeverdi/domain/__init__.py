"""Domain helpers: field mapping and value coercion for area records."""
