"""
Tests for the naming policy

This module tests name segmentation, masking and the inflect based phrase helpers.
"""

from unittest import TestCase

import pytest

from uml_enum_generator.domain.naming import (
    NamingConvention,
    describe_count,
    mask,
    prefix_with_a_predicate,
    separate,
    split_words,
)


NAMES = [
    "firstName",
    "FIRST_NAME",
    "URLValue",
    "url-value",
    "http2Server",
    "HTTP_STATUS",
    "x_y",
    "a1B",
    "AB1c",
    "  padded name  ",
    "already_lower_snake",
    "MixedCASEWord",
    "v2",
    "1st place",
]


class TestSplitWords(TestCase):
    """Test cases for split_words"""

    def test_camel_case(self):
        assert split_words("firstName") == ["first", "Name"]

    def test_leading_acronym(self):
        """An acronym followed by a capitalized word stays together"""
        assert split_words("URLValue") == ["URL", "Value"]

    def test_uppercase_chunks_are_not_split(self):
        assert split_words("HTTP_STATUS") == ["HTTP", "STATUS"]

    def test_symbols_separate_words(self):
        assert split_words("order-status.code") == ["order", "status", "code"]

    def test_empty_input(self):
        assert split_words("") == []
        assert split_words("__--..") == []

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            split_words(None)


class TestMask(TestCase):
    """Test cases for mask"""

    def test_upper_snake_from_camel_case(self):
        assert mask("firstName", NamingConvention.UPPER_SNAKE) == "FIRST_NAME"

    def test_upper_snake_from_acronym(self):
        assert mask("URLValue", NamingConvention.UPPER_SNAKE) == "URL_VALUE"

    def test_upper_snake_from_spaces_and_dashes(self):
        assert mask("order status-code", NamingConvention.UPPER_SNAKE) == "ORDER_STATUS_CODE"

    def test_lower_snake(self):
        assert mask("firstName", NamingConvention.LOWER_SNAKE) == "first_name"
        assert mask("URLValue", NamingConvention.LOWER_SNAKE) == "url_value"

    def test_empty_and_symbol_only_input(self):
        assert mask("", NamingConvention.UPPER_SNAKE) == ""
        assert mask("%%%", NamingConvention.UPPER_SNAKE) == ""

    def test_digits_are_kept(self):
        assert mask("http2Server", NamingConvention.UPPER_SNAKE) == "HTTP2_SERVER"

    def test_unsupported_convention(self):
        with pytest.raises(ValueError):
            mask("name", "camel")

    def test_idempotent_for_every_convention(self):
        """Masking a masked name returns it unchanged"""
        for convention in NamingConvention:
            for name in NAMES:
                once = mask(name, convention)
                assert mask(once, convention) == once, (convention, name)


class TestSeparate(TestCase):

    def test_joins_lowercase_words(self):
        assert separate("OrderStatus", "-") == "order-status"
        assert separate("URLValue", ".") == "url.value"


class TestPhraseHelpers(TestCase):
    """Test cases for the inflect based helpers"""

    def test_prefix_with_a_predicate(self):
        assert prefix_with_a_predicate("enumeration") == "an enumeration"
        assert prefix_with_a_predicate("classifier") == "a classifier"

    def test_prefix_with_a_predicate_empty(self):
        assert prefix_with_a_predicate("") == ""

    def test_describe_count(self):
        assert describe_count(1, "enumeration") == "1 enumeration"
        assert describe_count(3, "enumeration") == "3 enumerations"
        assert describe_count(0, "file") == "0 files"
