"""
Profiles database configuration.
Stores User and Admin documents in one collection, discriminated by `type`.
"""


class Collections:
    """Collection names in the profiles database."""
    PROFILES = "profiles"

    # Index definitions for each collection
    INDEXES = {
        "profiles": [
            {"keys": [("email", 1)], "unique": True},
            {"keys": [("username", 1)], "unique": True},
            {"keys": [("type", 1)]},
        ],
    }


class Fields:
    """Document field names shared by every profile variant."""
    ID = "_id"
    TYPE = "type"
    EMAIL = "email"
    USERNAME = "username"
    PASSWORD = "password"
    NAME = "name"
    LASTNAME = "lastname"
    TELEPHONE = "telephone"
    GENDER = "gender"
    CARD = "card"
    CURRENT_ACCOUNT = "currentAccount"


# Fields `update_user` is allowed to rewrite; email and username are fixed
USER_MUTABLE_FIELDS = (
    Fields.PASSWORD,
    Fields.NAME,
    Fields.LASTNAME,
    Fields.TELEPHONE,
    Fields.GENDER,
    Fields.CARD,
)
