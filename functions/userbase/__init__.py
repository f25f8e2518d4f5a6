"""
User record service.

Provides the validation rules for user records plus a small FastAPI
application that stores validated users in SQL or in memory.
"""
