"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): auth, contacts, messages, users
- queries/   → Read operations (CQRS): contacts, messages, users
- dto/       → Data Transfer Objects for the outer layer
- common/    → Command/Query base classes, validation helpers, patch sentinel

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Validates input before touching any repository
"""
