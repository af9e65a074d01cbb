"""
DOMAIN LAYER - Business rules of the anonymous messaging app

This layer contains:
- Entities: Business objects with identity (User, Contact, Message, Answer)
- Value Objects: Immutable types (UserId, ContactId, ContactLimit, PersonalLink)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no dishka, pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
