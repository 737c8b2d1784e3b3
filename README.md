# memoassistant

The building blocks of a personal memo assistant. It provides task and user records, three orderings for task lists, local user accounts kept in an SQLite file, and a small thread-safe singleton metaclass.

The package needs only the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tasks and ordering (`memoassistant.models`)

`Task` is a dataclass with these fields:

- `task_id`
- `name`
- `is_continuous`
- `start_time`
- `stop_time`
- `priority`
- `tags`, a list of strings that defaults to empty

`User` is a dataclass with the fields `id`, `name`, `email` and `db_name`.

`sort_tasks(tasks, order)` takes any iterable of tasks and returns a new sorted list. `order` is a `SortOrder` member or one of its values: `"date"`, `"priority"` or `"tags"`.

| Order | Sorted by | Ties broken by |
|---|---|---|
| `SortOrder.BY_DATE` | earliest `start_time` first | higher `priority` first |
| `SortOrder.BY_PRIORITY` | higher `priority` first | earlier `start_time` first |
| `SortOrder.BY_TAGS` | tag lists compared lexicographically | higher `priority` first |

```python
from memoassistant.models import SortOrder, sort_tasks

ordered = sort_tasks(tasks, SortOrder.BY_PRIORITY)
```

## Accounts and sessions (`memoassistant.accounts`)

### AccountStore

`AccountStore(path)` manages an SQLite file that holds a `users` table. The default path is `data/accounts.db`, and the parent directory is created when it is missing.

- `initialize()` creates the `users` table if it does not exist yet.
- `authenticate(name, password)` returns the `User` whose name and password match, and raises `LoginError` otherwise. If more than one row has that name and any of them matches the password, the details of the last such row are returned.
- If the database cannot be opened, created or read, it raises `AccountError`. `LoginError` is a subclass of `AccountError`.

### Session

`Session(store)` tracks who is logged in.

- `login(name, password)` initialises the store, authenticates, stores the user and returns it.
- `logout()` clears the user.
- `logged_in` tells whether a user is set.
- `database_name()` returns the logged-in user's `db_name`, or `"default"` when nobody is logged in.
- `user_card()` returns a `UserCard` with `title`, `subtitle` and `avatar`.
  - When logged in, the title is the user name, the subtitle is the e-mail address, and there is no avatar.
  - When nobody is logged in, the title is `"请登录"`, the subtitle is empty, and the avatar is `":/img/touxiang.png"`.

```python
from memoassistant.accounts import AccountStore, LoginError, Session

session = Session(AccountStore("data/accounts.db"))
password = "password"
try:
    session.login("alice", password)
except LoginError:
    print("wrong user name or password")
print(session.database_name())
```

## Singleton metaclass (`memoassistant.singleton`)

A class declared with `metaclass=SingletonMeta` is built once. Later calls return that same instance, and any new arguments are ignored. Creation is guarded by a lock.

## What this package does not do

- It has no graphical window and no command-line program.
- It cannot add or register user accounts. The `users` table has to be filled by other means.
- It does not store or load tasks. `database_name()` only names the per-user task database, and nothing here opens it.