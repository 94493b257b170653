"""Tests for the user and complaint services."""

import asyncio
import logging

import pytest

from complaint_tracker_api.app.core.errors import (
    ComplaintNotFound,
    DuplicateSecretCode,
    Unauthorized,
    UserNotFound,
)
from complaint_tracker_api.app.core.security import AdminAuthority
from complaint_tracker_api.app.schemas.complaint import Complaint
from complaint_tracker_api.app.schemas.user import User
from complaint_tracker_api.app.services.complaint_service import ComplaintService
from complaint_tracker_api.app.services.user_service import UserService


@pytest.fixture
def users(store):
    return UserService(store)


@pytest.fixture
def complaints(store):
    return ComplaintService(store, AdminAuthority("admin"))


class TestUserService:
    def test_register_then_login(self, users, sample_user):
        stored = asyncio.run(users.register(sample_user))

        assert asyncio.run(users.login("c1")) == stored

    def test_duplicate_logs_warning(self, users, sample_user, caplog):
        asyncio.run(users.register(sample_user))

        with caplog.at_level(logging.WARNING):
            with pytest.raises(DuplicateSecretCode):
                asyncio.run(users.register(sample_user))

        assert "already in use" in caplog.text
        assert "c1" not in caplog.text

    def test_login_unknown(self, users):
        with pytest.raises(UserNotFound):
            asyncio.run(users.login("missing"))


class TestComplaintService:
    def test_submit_and_view(self, users, complaints, sample_user, sample_complaint):
        asyncio.run(users.register(sample_user))
        stored = asyncio.run(complaints.submit(sample_complaint))

        viewed = asyncio.run(complaints.view(stored.id))

        assert viewed.resolved is False
        assert viewed.title == "Noise"

    def test_submit_unknown_user(self, complaints, sample_complaint):
        with pytest.raises(UserNotFound):
            asyncio.run(complaints.submit(sample_complaint))

    def test_admin_listing_requires_admin(self, complaints):
        with pytest.raises(Unauthorized):
            asyncio.run(complaints.list_for_admin("c1"))

    def test_admin_listing(self, users, complaints, sample_user, sample_complaint):
        asyncio.run(users.register(sample_user))
        asyncio.run(complaints.submit(sample_complaint))

        listed = asyncio.run(complaints.list_for_admin("admin"))

        assert [c.title for c in listed] == ["Noise"]

    def test_resolve_checks_admin_before_lookup(self, complaints):
        """A non-admin gets Unauthorized even for an unknown complaint."""
        with pytest.raises(Unauthorized):
            asyncio.run(complaints.resolve("404", "c1"))

    def test_resolve_unknown_complaint(self, complaints):
        with pytest.raises(ComplaintNotFound):
            asyncio.run(complaints.resolve("404", "admin"))

    def test_resolve_leaves_user_listing_stale(self, users, complaints, sample_user, sample_complaint):
        asyncio.run(users.register(sample_user))
        stored = asyncio.run(complaints.submit(sample_complaint))

        resolved = asyncio.run(complaints.resolve(stored.id, "admin"))

        assert resolved.resolved is True
        assert asyncio.run(complaints.view(stored.id)).resolved is True
        assert asyncio.run(complaints.list_for_user("c1"))[0].resolved is False

    def test_custom_admin_code(self, store, users, sample_user, sample_complaint):
        service = ComplaintService(store, AdminAuthority("root"))
        asyncio.run(users.register(sample_user))
        asyncio.run(service.submit(sample_complaint))

        with pytest.raises(Unauthorized):
            asyncio.run(service.list_for_admin("admin"))
        assert len(asyncio.run(service.list_for_admin("root"))) == 1


class TestAdminAuthority:
    def test_is_admin(self):
        authority = AdminAuthority("admin")

        assert authority.is_admin("admin")
        assert not authority.is_admin("Admin")
        assert not authority.is_admin("")

    def test_require_admin(self):
        with pytest.raises(Unauthorized):
            AdminAuthority("admin").require_admin("user")
