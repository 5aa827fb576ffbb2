"""Tests for laxcookie.errors: exception hierarchy and error messages."""

import pytest

from laxcookie.errors import ConfigurationError, LaxCookieError, MalformedCookieError


class TestHierarchy:
    def test_configuration_error_is_laxcookie_error(self) -> None:
        assert issubclass(ConfigurationError, LaxCookieError)

    def test_malformed_is_laxcookie_error(self) -> None:
        assert issubclass(MalformedCookieError, LaxCookieError)


class TestMalformedCookieError:
    def test_fields(self) -> None:
        err = MalformedCookieError(value="nope", kind="missing_field")
        assert err.value == "nope"
        assert err.kind == "missing_field"
        assert err.attribute == "expires"

    def test_str(self) -> None:
        err = MalformedCookieError(value="Wed, 99 Foo", kind="missing_field")
        assert str(err) == "Invalid 'expires' attribute: Wed, 99 Foo"

    def test_str_other_attribute(self) -> None:
        err = MalformedCookieError(value="-1x", kind="out_of_range", attribute="max-age")
        assert str(err) == "Invalid 'max-age' attribute: -1x"

    def test_frozen(self) -> None:
        err = MalformedCookieError(value="x", kind="out_of_range")
        with pytest.raises(AttributeError):
            err.value = "y"  # type: ignore[misc]

    def test_raise_and_catch_as_base(self) -> None:
        with pytest.raises(LaxCookieError, match="Invalid 'expires' attribute: x"):
            raise MalformedCookieError(value="x", kind="out_of_range")
