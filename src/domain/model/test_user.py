"""Unit tests for User domain model — UserStatus, ProfileChanges."""

import unittest
from datetime import datetime, timezone

from domain.model.user import ProfileChanges, User, UserStatus


class TestUserStatus(unittest.TestCase):
    """Tests for UserStatus string-enum behavior used by _to_domain adapter."""

    def test_user_status_is_string_enum(self):
        """UserStatus compares equal to its string value."""
        self.assertEqual(UserStatus.ONLINE, 'ONLINE')
        self.assertEqual(UserStatus.OFFLINE, 'OFFLINE')

    def test_user_status_from_string_value(self):
        """UserStatus can be constructed from values stored in MongoDB."""
        self.assertEqual(UserStatus('ONLINE'), UserStatus.ONLINE)
        self.assertEqual(UserStatus('OFFLINE'), UserStatus.OFFLINE)

    def test_unknown_status_rejected(self):
        with self.assertRaises(ValueError):
            UserStatus('AWAY')


class TestUser(unittest.TestCase):

    def test_new_user_has_no_id_or_birth_date(self):
        """A freshly built user waits for the repository to assign its id."""
        user = User(
            username='alice',
            name='Alice A',
            token='tok',
            status=UserStatus.ONLINE,
            creation_date=datetime.now(timezone.utc),
        )
        self.assertIsNone(user.id)
        self.assertIsNone(user.birth_date)


class TestProfileChanges(unittest.TestCase):

    def test_defaults_are_empty(self):
        changes = ProfileChanges()
        self.assertIsNone(changes.username)
        self.assertIsNone(changes.birth_date)

    def test_is_immutable(self):
        changes = ProfileChanges(username='bob')
        with self.assertRaises(AttributeError):
            changes.username = 'carol'
