"""
Unit tests for identifier case conversion and pluralization.
"""

import pytest

from jdl_angular.api.utils import (
    english_plural,
    naive_plural,
    split_words,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
)


class TestCaseConversion:
    """Test lodash-style word splitting and case helpers."""

    @pytest.mark.parametrize("name,words", [
        ("OrderItem", ["Order", "Item"]),
        ("orderItem", ["order", "Item"]),
        ("order_item", ["order", "item"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("item2Price", ["item", "2", "Price"]),
        ("", []),
    ])
    def test_split_words(self, name, words):
        assert split_words(name) == words

    @pytest.mark.parametrize("name,kebab", [
        ("OrderItem", "order-item"),
        ("Customer", "customer"),
        ("HTTPServer", "http-server"),
        ("order_item", "order-item"),
    ])
    def test_kebab_case(self, name, kebab):
        assert to_kebab_case(name) == kebab

    @pytest.mark.parametrize("name,camel", [
        ("OrderItem", "orderItem"),
        ("order-item", "orderItem"),
        ("HTTPServer", "httpServer"),
        ("customer", "customer"),
    ])
    def test_camel_case(self, name, camel):
        assert to_camel_case(name) == camel

    @pytest.mark.parametrize("name,pascal", [
        ("orderItem", "OrderItem"),
        ("order_item", "OrderItem"),
        ("Customer", "Customer"),
        ("", ""),
    ])
    def test_pascal_case(self, name, pascal):
        assert to_pascal_case(name) == pascal


class TestPluralization:
    """Test the two plural styles."""

    def test_naive_plural_appends_s(self):
        assert naive_plural("Customer") == "customers"

    def test_naive_plural_keeps_irregulars_naive(self):
        assert naive_plural("Category") == "categorys"
        assert naive_plural("Person") == "persons"

    def test_naive_plural_lowercases_whole_name(self):
        assert naive_plural("OrderItem") == "orderitems"

    def test_english_plural(self):
        assert english_plural("Category") == "categories"
        assert english_plural("Customer") == "customers"
