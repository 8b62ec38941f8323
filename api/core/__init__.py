"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, named SQL, errors, the generic repository and router). Keep
entity-specific SQL and schemas in the corresponding feature package
(e.g. `stock_sub_categories/`).
"""
