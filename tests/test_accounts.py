import sqlite3
from contextlib import closing

import pytest

from memoassistant.accounts import (
    AccountError,
    AccountStore,
    LoginError,
    Session,
)

PASSWORD = "password"


def add_user(path, name, email, password, db_name):
    with closing(sqlite3.connect(path)) as conn:
        conn.execute(
            "INSERT INTO users (UserName, UserEmail, UserPsw, UserDBName) "
            "VALUES (?, ?, ?, ?)",
            (name, email, password, db_name),
        )
        conn.commit()


@pytest.fixture
def store(tmp_path):
    s = AccountStore(tmp_path / "data" / "accounts.db")
    s.initialize()
    add_user(s.path, "alice", "alice@example.com", PASSWORD, "alice_tasks")
    return s


def table_names(path):
    with closing(sqlite3.connect(path)) as conn:
        return [
            r[0]
            for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        ]


def test_initialize_creates_users_table(tmp_path):
    s = AccountStore(tmp_path / "accounts.db")
    s.initialize()
    assert "users" in table_names(s.path)


def test_initialize_is_idempotent_and_keeps_data(store):
    store.initialize()
    user = store.authenticate("alice", PASSWORD)
    assert user.db_name == "alice_tasks"


def test_initialize_fails_on_unopenable_path(tmp_path):
    s = AccountStore(tmp_path)
    with pytest.raises(AccountError):
        s.initialize()


def test_authenticate_returns_user(store):
    user = store.authenticate("alice", PASSWORD)
    assert user.name == "alice"
    assert user.email == "alice@example.com"
    assert user.db_name == "alice_tasks"
    assert user.id >= 1


def test_wrong_password_raises(store):
    with pytest.raises(LoginError):
        store.authenticate("alice", "secret")


def test_unknown_user_raises(store):
    with pytest.raises(LoginError):
        store.authenticate("bob", PASSWORD)


def test_name_is_not_injectable(store):
    with pytest.raises(LoginError):
        store.authenticate("x' OR '1'='1", PASSWORD)


def test_authenticate_without_table_raises_account_error(tmp_path):
    s = AccountStore(tmp_path / "empty.db")
    with pytest.raises(AccountError):
        s.authenticate("alice", PASSWORD)


def test_session_defaults_before_login(store):
    session = Session(store)
    assert session.logged_in is False
    assert session.database_name() == "default"
    card = session.user_card()
    assert card.title == "请登录"
    assert card.subtitle == ""
    assert card.avatar == ":/img/touxiang.png"


def test_session_login_sets_user_and_database(store):
    session = Session(store)
    user = session.login("alice", PASSWORD)
    assert session.logged_in is True
    assert session.user == user
    assert session.database_name() == "alice_tasks"
    card = session.user_card()
    assert (card.title, card.subtitle) == ("alice", "alice@example.com")


def test_failed_login_leaves_session_logged_out(store):
    session = Session(store)
    with pytest.raises(LoginError):
        session.login("alice", "token")
    assert session.logged_in is False
    assert session.database_name() == "default"


def test_logout_returns_to_default(store):
    session = Session(store)
    session.login("alice", PASSWORD)
    session.logout()
    assert session.user is None
    assert session.database_name() == "default"
    assert session.user_card().title == "请登录"


def test_login_initialises_fresh_store(tmp_path):
    s = AccountStore(tmp_path / "fresh.db")
    session = Session(s)
    with pytest.raises(LoginError):
        session.login("alice", PASSWORD)
    assert "users" in table_names(s.path)