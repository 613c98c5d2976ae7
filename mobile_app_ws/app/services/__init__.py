"""
Storage layer abstraction.

``UserService`` keeps records in memory for the lifetime of the
process.  ``UserRepository`` stores them in SQLite.  Handlers receive
one of them explicitly when their router is built.
"""
