import unittest
from datetime import timedelta

from edusync.auth.session_token import decode_session_cookie, encode_session_cookie, seconds_until
from edusync.configs.database import make_engine
from edusync.configs.settings import Settings
from edusync.storage import DatabaseStorage, MemoryStorage


class SessionStoreContract:

    def make_storage(self, ttl):
        raise NotImplementedError

    def setUp(self):
        self.storage = self.make_storage(timedelta(hours=1))
        self.sessions = self.storage.session_store

    def tearDown(self):
        self.storage.close()

    def test_created_session_can_be_read_back(self):
        record = self.sessions.create(7)
        fetched = self.sessions.get(record.sid)
        self.assertEqual(fetched.user_id, 7)
        self.assertGreater(fetched.expires_at, fetched.created_at)

    def test_session_ids_are_unique_and_opaque(self):
        first = self.sessions.create(1)
        second = self.sessions.create(1)
        self.assertNotEqual(first.sid, second.sid)
        self.assertGreaterEqual(len(first.sid), 32)

    def test_destroy(self):
        record = self.sessions.create(1)
        self.assertTrue(self.sessions.destroy(record.sid))
        self.assertIsNone(self.sessions.get(record.sid))
        self.assertFalse(self.sessions.destroy(record.sid))

    def test_destroy_user_sessions_only_touches_that_user(self):
        self.sessions.create(1)
        self.sessions.create(1)
        other = self.sessions.create(2)
        self.assertEqual(self.sessions.destroy_user_sessions(1), 2)
        self.assertIsNotNone(self.sessions.get(other.sid))

    def test_unknown_session_is_none(self):
        self.assertIsNone(self.sessions.get("not-a-session"))


class SessionExpiryContract:

    def make_storage(self, ttl):
        raise NotImplementedError

    def setUp(self):
        self.storage = self.make_storage(timedelta(seconds=-1))
        self.sessions = self.storage.session_store

    def tearDown(self):
        self.storage.close()

    def test_expired_session_is_dropped_on_read(self):
        record = self.sessions.create(1)
        self.assertIsNone(self.sessions.get(record.sid))
        self.assertFalse(self.sessions.destroy(record.sid))

    def test_purge_expired(self):
        self.sessions.create(1)
        self.sessions.create(2)
        self.assertEqual(self.sessions.purge_expired(), 2)
        self.assertEqual(self.sessions.purge_expired(), 0)


def _memory(ttl):
    return MemoryStorage(session_ttl=ttl)


def _sqlite(ttl):
    storage = DatabaseStorage(make_engine(Settings(DATABASE_URL="sqlite://")), session_ttl=ttl)
    storage.create_schema()
    return storage


class TestMemorySessions(SessionStoreContract, unittest.TestCase):
    def make_storage(self, ttl):
        return _memory(ttl)


class TestDatabaseSessions(SessionStoreContract, unittest.TestCase):
    def make_storage(self, ttl):
        return _sqlite(ttl)


class TestMemorySessionExpiry(SessionExpiryContract, unittest.TestCase):
    def make_storage(self, ttl):
        return _memory(ttl)


class TestDatabaseSessionExpiry(SessionExpiryContract, unittest.TestCase):
    def make_storage(self, ttl):
        return _sqlite(ttl)


class TestSessionCookie(unittest.TestCase):

    def setUp(self):
        self.record = MemoryStorage(session_ttl=timedelta(minutes=30)).session_store.create(3)

    def test_cookie_carries_the_session_id(self):
        token = encode_session_cookie(self.record, "secret")
        self.assertEqual(decode_session_cookie(token, "secret"), self.record.sid)

    def test_cookie_signed_with_another_secret_is_ignored(self):
        token = encode_session_cookie(self.record, "secret")
        self.assertIsNone(decode_session_cookie(token, "other-secret"))

    def test_missing_or_garbage_cookie_is_ignored(self):
        self.assertIsNone(decode_session_cookie(None, "secret"))
        self.assertIsNone(decode_session_cookie("not.a.jwt", "secret"))

    def test_seconds_until_expiry(self):
        remaining = seconds_until(self.record.expires_at)
        self.assertTrue(29 * 60 <= remaining <= 30 * 60)


if __name__ == '__main__':
    unittest.main()
