"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (today flat JSON files).
Services depend on these store objects rather than touching the files directly.
"""
