"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks every feature uses (DB wiring, settings,
logging, the response envelope, service outcomes). Keep feature-specific SQL
and business logic in the corresponding feature package (e.g. `pathways/`).
"""
