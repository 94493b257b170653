"""Tests for the in-memory ComplaintStore."""

import threading

import pytest

from complaint_tracker_api.app.core.errors import (
    ComplaintNotFound,
    DuplicateSecretCode,
    UserNotFound,
)
from complaint_tracker_api.app.schemas.complaint import Complaint
from complaint_tracker_api.app.schemas.user import User


class TestRegister:
    def test_register_assigns_id_and_empty_complaints(self, store):
        user = User(id="99", secret_code="c1", name="Alice", email="a@example.com",
                    complaints=[Complaint(title="ignored")])

        stored = store.register(user)

        assert stored.id == "1"
        assert stored.complaints == []
        assert stored.secret_code == "c1"
        assert stored.name == "Alice"

    def test_duplicate_secret_code_rejected(self, store):
        store.register(User(secret_code="c1", name="First"))

        with pytest.raises(DuplicateSecretCode):
            store.register(User(secret_code="c1", name="Second"))

        assert len(store._users) == 1
        assert store.get_user("c1").name == "First"

    def test_user_ids_follow_complaint_count(self, store, sample_user, sample_complaint):
        """User IDs come from the complaints table size, so they repeat."""
        first = store.register(sample_user)
        second = store.register(User(secret_code="c2"))
        store.add_complaint(sample_complaint)
        third = store.register(User(secret_code="c3"))

        assert (first.id, second.id, third.id) == ("1", "1", "2")

    def test_returned_record_is_detached(self, store, sample_user):
        stored = store.register(sample_user)
        stored.name = "Mallory"

        assert store.get_user("c1").name == "Alice"


class TestGetUser:
    def test_unknown_code(self, store):
        with pytest.raises(UserNotFound):
            store.get_user("nobody")

    def test_returns_exact_stored_record(self, store, sample_user):
        stored = store.register(sample_user)

        assert store.get_user("c1") == stored


class TestAddComplaint:
    def test_unknown_owner_leaves_tables_unchanged(self, store, sample_user):
        store.register(sample_user)

        with pytest.raises(UserNotFound):
            store.add_complaint(Complaint(title="x", secret_code="ghost"))

        assert len(store._complaints) == 0
        assert store.get_user("c1").complaints == []

    def test_ids_are_sequential(self, store, sample_user, sample_complaint):
        store.register(sample_user)

        ids = [store.add_complaint(sample_complaint).id for _ in range(3)]

        assert ids == ["1", "2", "3"]

    def test_copy_appended_to_owner(self, store, sample_user, sample_complaint):
        store.register(sample_user)
        stored = store.add_complaint(sample_complaint)

        embedded = store.complaints_for_user("c1")
        assert embedded == [stored]
        assert embedded[0].severity == 5

    def test_new_complaint_is_unresolved(self, store, sample_user):
        store.register(sample_user)
        stored = store.add_complaint(Complaint(title="x", resolved=True, secret_code="c1"))

        assert stored.resolved is False
        assert store.get_complaint(stored.id).resolved is False

    def test_user_and_complaint_share_first_id(self, store, sample_user, sample_complaint):
        user = store.register(sample_user)
        complaint = store.add_complaint(sample_complaint)

        assert user.id == complaint.id == "1"
        assert store.get_complaint("1").title == "Noise"


class TestResolve:
    def test_resolve_updates_canonical_only(self, store, sample_user, sample_complaint):
        store.register(sample_user)
        complaint = store.add_complaint(sample_complaint)

        store.resolve_complaint(complaint.id)

        assert store.get_complaint(complaint.id).resolved is True
        # The user's embedded copy still reflects submission time.
        assert store.complaints_for_user("c1")[0].resolved is False
        assert store.get_user("c1").complaints[0].resolved is False

    def test_resolve_unknown(self, store):
        with pytest.raises(ComplaintNotFound):
            store.resolve_complaint("42")


class TestListings:
    def test_all_user_complaints_concatenates_in_registration_order(self, store):
        store.register(User(secret_code="a"))
        store.register(User(secret_code="b"))
        store.add_complaint(Complaint(title="b1", secret_code="b"))
        store.add_complaint(Complaint(title="a1", secret_code="a"))
        store.add_complaint(Complaint(title="b2", secret_code="b"))

        titles = [c.title for c in store.all_user_complaints()]

        assert titles == ["a1", "b1", "b2"]

    def test_all_user_complaints_empty(self, store):
        assert store.all_user_complaints() == []

    def test_complaints_for_unknown_user(self, store):
        with pytest.raises(UserNotFound):
            store.complaints_for_user("nobody")

    def test_get_unknown_complaint(self, store):
        with pytest.raises(ComplaintNotFound):
            store.get_complaint("1")

    def test_get_complaint_with_missing_owner(self, store, sample_user, sample_complaint):
        store.register(sample_user)
        store.add_complaint(sample_complaint)
        del store._users["c1"]

        with pytest.raises(UserNotFound):
            store.get_complaint("1")


def test_concurrent_submissions_get_unique_ids(store):
    """All submissions from parallel threads land with distinct IDs."""
    store.register(User(secret_code="c1"))
    threads_count, per_thread = 8, 25

    def worker():
        for i in range(per_thread):
            store.add_complaint(Complaint(title=f"t{i}", secret_code="c1"))

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    total = threads_count * per_thread
    assert len(store._complaints) == total
    assert len(store.complaints_for_user("c1")) == total
    ids = {store.get_complaint(str(n)).id for n in range(1, total + 1)}
    assert len(ids) == total
