"""
Endpoint subpackage.

Each module defines a ``create_router`` factory that takes the storage
backend as an argument and returns an ``APIRouter`` bound to it.
"""
