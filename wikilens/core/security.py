
import bcrypt
from starlette.requests import Request

SESSION_USER_KEY = "user_id"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def login_session(request: Request, user_id: int) -> None:
    # drop anything left from a previous login before binding the new user
    request.session.clear()
    request.session[SESSION_USER_KEY] = user_id


def session_user_id(request: Request) -> int | None:
    return request.session.get(SESSION_USER_KEY)


def invalidate_session(request: Request) -> None:
    request.session.clear()
