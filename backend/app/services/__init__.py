"""Service Layer — one module per route, sitting between routes and infrastructure."""
