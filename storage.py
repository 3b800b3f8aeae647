"""File-backed stores for the landing page.

``SubscriptionStore`` keeps every subscription in memory, keyed by email,
and mirrors the whole set to a JSON array on disk each time a new address
is added. ``UserStore`` is the in-memory account placeholder.
"""
import json
import logging
import os
import threading
from datetime import datetime

import pytz
from passlib.hash import pbkdf2_sha256

from errors import PersistenceError
from models import EmailSubscription, Users


def utc_now():
    return datetime.now(pytz.utc)


class SubscriptionStore:
    """Deduplicating subscription store persisted to a single JSON file.

    The store must be opened before use and closed on shutdown::

        store = SubscriptionStore("email_subscriptions.json")
        store.open()
        ...
        store.close()

    Writes are serialised by a lock so the check-assign-write sequence in
    :meth:`save` never races with itself.
    """

    def __init__(self, path, clock=None, logger=None):
        self.path = os.fspath(path)
        self.clock = clock or utc_now
        self.logger = logger or logging.getLogger(__name__)
        self._subscriptions = {}
        self._next_id = 1
        self._opened = False
        self._lock = threading.Lock()

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __len__(self):
        with self._lock:
            return len(self._subscriptions)

    @property
    def next_id(self):
        return self._next_id

    def open(self):
        """Create the file if missing and load its records into memory."""
        with self._lock:
            if self._opened:
                return
            if not os.path.exists(self.path):
                self._write([])
                self.logger.info(f"Initialised empty subscriptions file at {self.path}")

            subscriptions = {}
            max_id = 0
            for record in self._read():
                if record.email in subscriptions:
                    self.logger.warning(f"Duplicate subscription for {record.email} in {self.path}; keeping the first")
                else:
                    subscriptions[record.email] = record
                max_id = max(max_id, record.id)

            self._subscriptions = subscriptions
            self._next_id = max_id + 1
            self._opened = True
            self.logger.info(f"Loaded {len(subscriptions)} subscriptions from {self.path}")

    def close(self):
        """Stop accepting calls.

        Every successful :meth:`save` has already reached disk, so nothing is
        flushed here. Rewriting from this snapshot would drop records another
        store saved to the same file in the meantime.
        """
        with self._lock:
            self._opened = False

    def save(self, email):
        """Return the subscription for *email*, creating and persisting it if new.

        A repeat email returns the existing record untouched. For a new email
        the file is rewritten before the in-memory index changes, so a failed
        write raises :class:`PersistenceError` and leaves both views as they
        were.
        """
        with self._lock:
            self._ensure_open()

            existing = self._subscriptions.get(email)
            if existing is not None:
                return existing

            new_subscription = EmailSubscription(
                id=self._next_id,
                email=email,
                created_at=self.clock()
            )
            self._write(list(self._subscriptions.values()) + [new_subscription])

            self._subscriptions[email] = new_subscription
            self._next_id += 1
            return new_subscription

    def get_by_email(self, email):
        with self._lock:
            self._ensure_open()
            return self._subscriptions.get(email)

    def get_all(self):
        """All subscriptions in the order they were first saved."""
        with self._lock:
            self._ensure_open()
            return list(self._subscriptions.values())

    def _ensure_open(self):
        if not self._opened:
            raise PersistenceError("Subscription store is not open")

    def _read(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            return [EmailSubscription.from_dict(item) for item in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            self.logger.error(f"Error loading email subscriptions from {self.path}: {e}")
            raise PersistenceError("Failed to load email subscriptions") from e

    def _write(self, subscriptions):
        tmp_path = self.path + ".tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump([sub.to_dict() for sub in subscriptions], f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            self.logger.error(f"Error saving email subscriptions to {self.path}: {e}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError("Failed to save email subscription") from e


class UserStore:
    """In-memory user accounts. Kept for a future login; nothing calls it from a route."""

    def __init__(self):
        self.users = {}
        self.current_id = 1

    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_user_by_username(self, username):
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, username, password):
        if self.get_user_by_username(username):
            raise ValueError("Username already exists.")

        user = Users(id=self.current_id, username=username, password=pbkdf2_sha256.hash(password))
        self.users[user.id] = user
        self.current_id += 1
        return user

    @staticmethod
    def verify_password(user, password):
        return pbkdf2_sha256.verify(password, user.password)
