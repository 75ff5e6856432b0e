"""
Service layer abstraction.

Each service owns the SQL for one table.  Every method runs exactly one
parameterized ``SELECT`` through ``core.db.fetch_all`` and returns the
rows untouched; deciding between 200, 404 and 500 is left to the API
layer.
"""
