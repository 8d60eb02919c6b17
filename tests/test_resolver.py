import pytest

from src.steamconnect.services.resolver import is_ip_literal, resolve_host


@pytest.mark.parametrize("host", ["116.202.245.30", "::1", "2001:db8::7", "0.0.0.0"])
def test_ip_literals_are_detected(host):
    assert is_ip_literal(host)


@pytest.mark.parametrize("host", ["example.com", "1.2.3", "256.1.1.1", "localhost", ""])
def test_non_literals_are_not_detected(host):
    assert not is_ip_literal(host)


def test_ip_literal_is_returned_without_lookup(fake_dns):
    resolution = resolve_host("116.202.245.30")

    assert resolution.ok
    assert resolution.address == "116.202.245.30"
    assert fake_dns == []


def test_hostname_resolves_to_first_ipv4_address(fake_dns):
    resolution = resolve_host("teamserver.example.com")

    assert resolution.ok
    assert resolution.address == "203.0.113.7"
    assert fake_dns == ["teamserver.example.com"]


def test_ipv6_family_returns_ipv6_address(fake_dns):
    assert resolve_host("teamserver.example.com", family="ipv6").address == "2001:db8::7"


def test_any_family_uses_first_record(fake_dns):
    assert resolve_host("v6only.example.com", family="any").address == "2001:db8::42"


def test_ipv6_only_host_fails_under_ipv4(fake_dns):
    resolution = resolve_host("v6only.example.com")

    assert not resolution.ok
    assert resolution.address is None
    assert resolution.error


def test_unknown_host_reports_failure(fake_dns):
    resolution = resolve_host("not-a-real-host-xyz")

    assert not resolution.ok
    assert resolution.host == "not-a-real-host-xyz"
    assert "not known" in resolution.error


def test_unknown_family_raises(fake_dns):
    with pytest.raises(ValueError, match="Unknown address family"):
        resolve_host("teamserver.example.com", family="ipx")
