"""Unit tests for entity rules, timestamps and the password hasher."""

from datetime import datetime, timedelta, timezone

import pytest

from proxy_manager.domain.entities import DashboardStats, Proxy, ProxyStatus
from proxy_manager.domain.entities.timestamps import advance, as_utc
from proxy_manager.domain.exceptions import DomainValidationError, ReferentialIntegrityError
from proxy_manager.infrastructure.security.password_hasher import Sha256PasswordHasher


def test_advance_moves_past_a_future_timestamp():
    future = datetime.now(timezone.utc) + timedelta(hours=1)
    assert advance(future) == future + timedelta(microseconds=1)


def test_as_utc_attaches_timezone_to_naive_values():
    naive = datetime(2026, 1, 1, 12, 0)
    assert as_utc(naive).tzinfo == timezone.utc


def test_proxy_rejects_bad_public_address_update():
    proxy = Proxy(device_name="Gate-1", internal_address="10.0.0.5", port=8080, username="u", password="p")
    with pytest.raises(DomainValidationError):
        proxy.update_status(public_address="nope")
    assert proxy.public_address is None


def test_proxy_accepts_ipv6_addresses():
    proxy = Proxy(device_name="Gate-6", internal_address="fd00::5", port=8080, username="u", password="p")
    proxy.update_status(status=ProxyStatus.ONLINE, public_address="2001:db8::1")
    assert proxy.is_online


def test_dashboard_active_proxies_mirrors_online():
    stats = DashboardStats(total_proxies=5, online_proxies=3, offline_proxies=2, total_users=0)
    assert stats.active_proxies == 3


def test_referential_integrity_error_message():
    exc = ReferentialIntegrityError("Proxy", 7, referenced_by="ProxySession")
    assert "ProxySession" in str(exc)
    assert exc.entity_id == 7


def test_sha256_hasher_is_deterministic_hex():
    hasher = Sha256PasswordHasher()
    digest = hasher.hash("secret1")
    assert digest == hasher.hash("secret1")
    assert len(digest) == 64
    assert digest != hasher.hash("secret2")
