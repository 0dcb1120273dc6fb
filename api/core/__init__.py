"""
Process-wide wiring shared by the hotel API and the seed script:
environment settings and the asyncpg-backed `Database` handle.
"""
