# services/models.py
from dataclasses import dataclass, field

USER_KEYS = ("userId", "username", "password", "age", "hobbies", "city", "level", "coins")


@dataclass
class User:
    user_id: str
    username: str
    password: str
    age: int
    hobbies: list
    city: str
    level: int = 1
    coins: int = 0
    # stored keys this model does not know about, written back unchanged
    extra: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        # Key order matches the persisted layout.
        data = {
            "userId": self.user_id,
            "username": self.username,
            "password": self.password,
            "age": self.age,
            "hobbies": self.hobbies,
            "city": self.city,
            "level": self.level,
            "coins": self.coins,
        }
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Build a User from its stored form; raises KeyError on a missing field."""
        return cls(
            user_id=data["userId"],
            username=data["username"],
            password=data["password"],
            age=data["age"],
            hobbies=data["hobbies"],
            city=data["city"],
            level=data["level"],
            coins=data["coins"],
            extra={k: v for k, v in data.items() if k not in USER_KEYS},
        )


@dataclass
class Database:
    users: list = field(default_factory=list)
    extra: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = {"users": [u.to_dict() for u in self.users]}
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, data) -> "Database":
        if not isinstance(data, dict):
            raise ValueError("database document must be a JSON object")
        users = data.get("users")
        if not isinstance(users, list):
            raise ValueError("database document needs a 'users' list")
        return cls(
            users=[User.from_dict(u) for u in users],
            extra={k: v for k, v in data.items() if k != "users"},
        )


# -------------------------
# Login outcomes
# -------------------------
class LoginResult:
    """Base for the three login outcomes. Only Success is truthy."""

    ok = False

    def __bool__(self):
        return self.ok


@dataclass
class NotFound(LoginResult):
    """No user has the given username."""


@dataclass
class InvalidCredentials(LoginResult):
    """The username exists but the password does not match."""


@dataclass
class Success(LoginResult):
    user: User
    ok = True
