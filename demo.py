"""Sign up a sample user, then log in with the generated password."""

from config.settings import DATABASE_FILE, LOG_LEVEL, LOG_FILE
from services.account_service import AccountService
from services.store import JsonFileStore
from utils.logger import setup_logger


def main():
    setup_logger(LOG_LEVEL, LOG_FILE or None)

    store = JsonFileStore(DATABASE_FILE)
    store.init_db()
    service = AccountService(store)

    # SIGN UP user
    new_user = service.create_user("john", 22, ["music", "games"], "London")
    print("New Account Created:", new_user.to_dict())

    # LOGIN user
    result = service.login("john", new_user.password)
    print("Login Result:", result)


if __name__ == "__main__":
    main()
