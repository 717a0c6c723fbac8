# File: src/mstair/envelope/test_config.py
"""
Tests for the domain case-folding policy: environment, overrides, contexts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from mstair.envelope import config
from mstair.envelope.config import (
    DomainCase,
    domain_case,
    domain_case_context,
    domain_case_from_environment,
    fold_domain,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear ENVELOPE_DOMAIN_CASE and any thread override around each test."""
    monkeypatch.delenv(config.DOMAIN_CASE_ENV_VAR, raising=False)
    domain_case(unset_override=True)
    yield
    domain_case(unset_override=True)


class TestEnvironment:
    def test_default_is_ascii(self) -> None:
        assert domain_case_from_environment() is DomainCase.ASCII
        assert domain_case() is DomainCase.ASCII

    @pytest.mark.parametrize("value", ["casefold", "CASEFOLD", " 'casefold' "])
    def test_casefold_value(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv(config.DOMAIN_CASE_ENV_VAR, value)
        assert domain_case() is DomainCase.CASEFOLD

    def test_unknown_value_warns_and_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(config.DOMAIN_CASE_ENV_VAR, "unicode")
        with caplog.at_level(logging.WARNING):
            assert domain_case() is DomainCase.ASCII
        assert any("ENVELOPE_DOMAIN_CASE" in r.getMessage() for r in caplog.records)


class TestOverrides:
    def test_override_wins_over_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(config.DOMAIN_CASE_ENV_VAR, "casefold")
        assert domain_case(override=DomainCase.ASCII) is DomainCase.ASCII
        assert domain_case() is DomainCase.ASCII
        assert domain_case(unset_override=True) is DomainCase.CASEFOLD

    def test_context_nests_and_restores(self) -> None:
        with domain_case_context(DomainCase.CASEFOLD) as outer:
            assert outer is DomainCase.CASEFOLD
            with domain_case_context(DomainCase.ASCII):
                assert domain_case() is DomainCase.ASCII
            assert domain_case() is DomainCase.CASEFOLD
        assert domain_case() is DomainCase.ASCII

    def test_context_restores_after_exception(self) -> None:
        with pytest.raises(RuntimeError), domain_case_context(DomainCase.CASEFOLD):
            raise RuntimeError("boom")
        assert domain_case() is DomainCase.ASCII


class TestFoldDomain:
    @pytest.mark.parametrize(
        ("mode", "domain", "expected"),
        [
            (DomainCase.ASCII, "Example.COM", "example.com"),
            (DomainCase.ASCII, "MÜNICH.Example.COM", "mÜnich.example.com"),
            (DomainCase.ASCII, "STRASSE.ẞ.DE", "strasse.ẞ.de"),
            (DomainCase.CASEFOLD, "MÜNICH.Example.COM", "münich.example.com"),
            (DomainCase.CASEFOLD, "Straße.DE", "strasse.de"),
            (DomainCase.CASEFOLD, "例え.テスト", "例え.テスト"),
        ],
    )
    def test_fold(self, mode: DomainCase, domain: str, expected: str) -> None:
        assert fold_domain(domain, mode) == expected
        assert fold_domain(expected, mode) == expected

    def test_uses_active_policy_by_default(self) -> None:
        assert fold_domain("ÄRZTE.de") == "Ärzte.de"
        with domain_case_context(DomainCase.CASEFOLD):
            assert fold_domain("ÄRZTE.de") == "ärzte.de"


# End of file: src/mstair/envelope/test_config.py
