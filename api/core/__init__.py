"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(settings, DB wiring, logging, the outbound HTTP client). Keep feature-specific
SQL and business logic in the corresponding feature package (e.g. `todos/`).
"""
