from flask import Flask, request, jsonify
from flask_cors import CORS

from config.settings import DATABASE_FILE, LOG_LEVEL, LOG_FILE
from services.account_service import AccountService
from services.models import NotFound, InvalidCredentials
from services.store import JsonFileStore
from utils.exceptions import InputError, StorageError
from utils.logger import setup_logger


app = Flask(__name__)
app.config["DATABASE_FILE"] = DATABASE_FILE
CORS(app, resources={r"/*": {"origins": "*"}})


def _service() -> AccountService:
    return AccountService(JsonFileStore(app.config["DATABASE_FILE"]))


# -------------------------
# Error Handlers
# -------------------------
@app.errorhandler(InputError)
def input_error(e):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(StorageError)
def storage_error(e):
    return jsonify({"error": str(e)}), 500


# -------------------------
# Register
# -------------------------
@app.route("/register", methods=["POST"])
def register():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InputError("JSON object body required")

    # Values are stored as given, without validation.
    user = _service().create_user(
        data.get("username"),
        data.get("age"),
        data.get("hobbies"),
        data.get("city"),
    )
    return jsonify(user.to_dict()), 201


# -------------------------
# Login
# -------------------------
@app.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InputError("JSON object body required")
    username = data.get("username")
    password = data.get("password")

    if username is None or password is None:
        raise InputError("Username and password required")

    result = _service().login(username, password)
    if isinstance(result, NotFound):
        return jsonify({"error": "User not found"}), 404
    if isinstance(result, InvalidCredentials):
        return jsonify({"error": "Invalid password"}), 401

    return jsonify(result.user.to_dict())


@app.route("/", methods=["GET"])
def welcome():
    return "Welcome to the account store"


# -------------------------
# Run App
# -------------------------
if __name__ == "__main__":
    setup_logger(LOG_LEVEL, LOG_FILE or None)
    JsonFileStore(app.config["DATABASE_FILE"]).init_db()
    app.run(debug=False)
