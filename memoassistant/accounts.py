"""Account storage in SQLite and the login session built on it."""

from __future__ import annotations

import sqlite3
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path

from .models import User

DEFAULT_ACCOUNT_DB = Path("data") / "accounts.db"
DEFAULT_DATABASE_NAME = "default"
LOGGED_OUT_TITLE = "请登录"
LOGGED_OUT_AVATAR = ":/img/touxiang.png"

_CREATE_USERS = (
    "CREATE TABLE users("
    "UserID INTEGER PRIMARY KEY AUTOINCREMENT,"
    "UserName TEXT NOT NULL,"
    "UserEmail TEXT DEFAULT '',"
    "UserPsw TEXT DEFAULT '',"
    "UserDBName TEXT NOT NULL);"
)


class AccountError(Exception):
    """The account database could not be opened, created or read."""


class LoginError(AccountError):
    """The user name or password is wrong."""


@dataclass(frozen=True)
class UserCard:
    """What the user information card shows."""

    title: str
    subtitle: str
    avatar: str | None = None


class AccountStore:
    """The SQLite file that holds user accounts."""

    def __init__(self, path: str | Path = DEFAULT_ACCOUNT_DB) -> None:
        self.path = Path(path)

    def _connect(self) -> sqlite3.Connection:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            return sqlite3.connect(self.path)
        except (OSError, sqlite3.Error) as exc:
            raise AccountError(f"cannot open account database {self.path}: {exc}") from exc

    def initialize(self) -> None:
        """Create the users table if it does not exist yet."""
        with closing(self._connect()) as conn:
            try:
                (count,) = conn.execute(
                    "SELECT COUNT(*) FROM sqlite_master "
                    "WHERE type = 'table' AND name = 'users';"
                ).fetchone()
                if count == 1:
                    return
                conn.execute(_CREATE_USERS)
                conn.commit()
            except sqlite3.Error as exc:
                raise AccountError(f"cannot initialise account database: {exc}") from exc

    def authenticate(self, name: str, password: str) -> User:
        """Return the user whose name and password match, or raise LoginError."""
        with closing(self._connect()) as conn:
            try:
                rows = conn.execute(
                    "SELECT UserID, UserEmail, UserDBName, UserPsw "
                    "FROM users WHERE UserName = ?;",
                    (name,),
                ).fetchall()
            except sqlite3.Error as exc:
                raise AccountError(f"cannot read account database: {exc}") from exc
        if not any(row[3] == password for row in rows):
            raise LoginError("wrong user name or password")
        user_id, email, db_name, _ = rows[-1]
        return User(id=user_id, name=name, email=email or "", db_name=db_name)


class Session:
    """Who is logged in, and which task database belongs to them."""

    def __init__(self, store: AccountStore) -> None:
        self.store = store
        self.user: User | None = None

    @property
    def logged_in(self) -> bool:
        return self.user is not None

    def login(self, name: str, password: str) -> User:
        """Log in; raises AccountError or LoginError on failure."""
        self.store.initialize()
        self.user = self.store.authenticate(name, password)
        return self.user

    def logout(self) -> None:
        self.user = None

    def database_name(self) -> str:
        """The task database to open for the current user."""
        return self.user.db_name if self.user else DEFAULT_DATABASE_NAME

    def user_card(self) -> UserCard:
        if self.user is None:
            return UserCard(LOGGED_OUT_TITLE, "", LOGGED_OUT_AVATAR)
        return UserCard(self.user.name, self.user.email)