"""
Services Package

Logic kept out of the HTTP layer so it can be tested in isolation:
- identity.py: user/role lookups and password sign-in checks
- mapping.py: entity <-> DTO conversion functions
- rate_limiter.py: slowapi limiter for the login endpoint
- security.py: password hashing and JWT utilities
- validation.py: field-level validation of request bodies
"""
