from enum import Enum


class AccountRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
