# services/account_service.py
import random
import string

from loguru import logger

from config.settings import DATABASE_FILE
from services.models import InvalidCredentials, LoginResult, NotFound, Success, User
from services.store import JsonFileStore

PASSWORD_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits
PASSWORD_LENGTH = 6
USER_ID_MIN = 100000
USER_ID_MAX = 999999


class AccountService:
    """Create accounts and check credentials against a Store.

    Every call reloads the full database; nothing is cached between calls.
    Usernames and user ids are not checked for uniqueness.
    """

    def __init__(self, store, rng: random.Random | None = None):
        self.store = store
        self.rng = rng or random.Random()

    def generate_password(self) -> str:
        return "".join(self.rng.choice(PASSWORD_CHARS) for _ in range(PASSWORD_LENGTH))

    def generate_user_id(self) -> str:
        return "U" + str(self.rng.randint(USER_ID_MIN, USER_ID_MAX))

    def create_user(self, username: str, age: int, hobbies: list, city: str) -> User:
        db = self.store.load()

        user = User(
            user_id=self.generate_user_id(),
            username=username,
            password=self.generate_password(),
            age=age,
            hobbies=hobbies,
            city=city,
            level=1,
            coins=0,
        )

        db.users.append(user)
        self.store.save(db)

        logger.info("Created user {} ({})", user.username, user.user_id)
        return user

    def login(self, username: str, password: str) -> LoginResult:
        db = self.store.load()

        # first match wins when usernames repeat
        user = next((u for u in db.users if u.username == username), None)
        if user is None:
            logger.debug("Login failed, unknown user {}", username)
            return NotFound()

        if user.password != password:
            logger.info("Login failed, wrong password for {}", username)
            return InvalidCredentials()

        logger.info("User {} logged in", username)
        return Success(user)


def _default_service() -> AccountService:
    return AccountService(JsonFileStore(DATABASE_FILE))


def create_user(username: str, age: int, hobbies: list, city: str) -> User:
    return _default_service().create_user(username, age, hobbies, city)


def login(username: str, password: str) -> LoginResult:
    return _default_service().login(username, password)
