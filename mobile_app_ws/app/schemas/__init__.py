"""
Pydantic schema definitions for API payloads.

Request shapes are kept separate from the stored/returned shape so
that fields a client may not change (``userId``, ``email``,
``password`` on update) never reach the storage layer.
"""
