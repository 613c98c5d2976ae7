"""
API package containing the HTTP routes.

``router.py`` exposes ``build_api_router`` which mounts the in‑memory
and persisted user routers under their base paths.
"""
