"""
DTOs - Data Transfer Objects

DTOs for handing use case results to an outer layer (API, UI):
- user.py    → UserDTO
- contact.py → ContactDTO, ContactListDTO
- message.py → MessageDTO, AnswerDTO

Note: These are different from domain entities.
DTOs are for input/output, entities are for business logic.
"""

from anonymous_message.application.dto.user import UserDTO
from anonymous_message.application.dto.contact import ContactDTO, ContactListDTO
from anonymous_message.application.dto.message import AnswerDTO, MessageDTO

__all__ = [
    "UserDTO",
    "ContactDTO",
    "ContactListDTO",
    "AnswerDTO",
    "MessageDTO",
]
