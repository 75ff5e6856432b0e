"""
API package containing the HTTP routes.

``router`` aggregates the per‑table routers found in ``endpoints``;
``responses`` and ``params`` hold the helpers they share.
"""
