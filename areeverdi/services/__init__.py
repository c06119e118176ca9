"""
High-level use cases for the Aree Verdi API.

Service modules orchestrate the repositories to implement the business rules
(listing with filters, unique idLoc on create, update/delete by idLoc).
Routers call these services instead of manipulating the JSON file directly.
"""
