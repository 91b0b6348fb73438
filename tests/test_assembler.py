"""Tests for the generic parser and the record assembler."""

import pytest
from datetime import date

from ledgerstore.codec.assembler import (
    build_article,
    build_transaction,
    build_wallet,
)
from ledgerstore.codec.errors import DecodeError, MalformedRecordError
from ledgerstore.codec.parser import (
    CollectionStatus,
    parse_collection,
    parse_object,
)


class TestParseObject:
    """Tests for turning one object span into a field mapping."""

    def test_article_object(self):
        """Test a complete article object."""
        fields = parse_object(
            '{"name": "Food", "type": "Expense", "subArticles": ["Groceries", "Dining"]}'
        )
        assert fields == {
            "name": "Food",
            "type": "Expense",
            "subArticles": ["Groceries", "Dining"],
        }

    def test_numbers_are_floats(self):
        """Test bare numbers become floats."""
        assert parse_object('{"name": "Cash", "initialBalance": 100}') == {
            "name": "Cash",
            "initialBalance": 100.0,
        }

    def test_key_split_at_first_colon(self):
        """Test values may contain colons."""
        assert parse_object('{"comment": "ratio 1:2"}') == {"comment": "ratio 1:2"}

    def test_segment_without_colon_ignored(self):
        """Test segments without a colon are skipped."""
        assert parse_object('{"name": "x", "orphan"}') == {"name": "x"}

    def test_repeated_key_keeps_last(self):
        """Test a repeated key keeps its last value."""
        assert parse_object('{"name": "a", "name": "b"}') == {"name": "b"}

    def test_empty_object(self):
        """Test {}."""
        assert parse_object("{}") == {}


class TestParseCollection:
    """Tests for locating and parsing a top-level collection."""

    def test_present(self):
        """Test a well-formed collection."""
        collection = parse_collection('{"wallets": [{"name": "A"}, {"name": "B"}]}', "wallets")
        assert collection.status == CollectionStatus.PRESENT
        assert collection.objects == [{"name": "A"}, {"name": "B"}]

    def test_missing(self):
        """Test an absent key."""
        collection = parse_collection('{"articles": []}', "wallets")
        assert collection.status == CollectionStatus.MISSING
        assert collection.objects == []

    def test_unbalanced(self):
        """Test an array that is never closed."""
        collection = parse_collection('{"wallets": [{"name": "A"}', "wallets")
        assert collection.status == CollectionStatus.UNBALANCED
        assert collection.start == 12
        assert collection.objects == []


class TestRecordAssembler:
    """Tests for building typed records from field mappings."""

    def test_build_article(self):
        """Test a complete article."""
        article = build_article({"name": "Food", "type": "Expense", "subArticles": ["Dining"]})
        assert article.name == "Food"
        assert article.type == "Expense"
        assert article.sub_articles == ["Dining"]

    def test_article_defaults(self):
        """Test absent keys take defaults."""
        article = build_article({})
        assert article.name == ""
        assert article.sub_articles == []

    def test_wallet_balance_default(self):
        """Test absent balance is 0.0."""
        assert build_wallet({"name": "Cash"}).initial_balance == 0.0

    def test_wallet_quoted_balance(self):
        """Test a quoted numeric balance is accepted."""
        assert build_wallet({"name": "Cash", "initialBalance": "12.5"}).initial_balance == 12.5

    def test_transaction_defaults(self):
        """Test an empty transaction mapping."""
        t = build_transaction({})
        assert t.date is None
        assert t.amount == 0.0
        assert t.sub_article is None
        assert t.wallet is None
        assert t.comment is None

    def test_transaction_complete(self):
        """Test every transaction field."""
        t = build_transaction({
            "date": "2024-01-05",
            "type": "Expense",
            "article": "Food",
            "subArticle": "Groceries",
            "wallet": "Cash",
            "amount": 12.5,
            "comment": "weekly",
            "unknown": "ignored",
        })
        assert t.date == date(2024, 1, 5)
        assert t.type == "Expense"
        assert t.article == "Food"
        assert t.sub_article == "Groceries"
        assert t.wallet == "Cash"
        assert t.amount == 12.5
        assert t.comment == "weekly"

    def test_empty_date_is_absent(self):
        """Test "" as date means no date."""
        assert build_transaction({"date": ""}).date is None
        assert build_transaction({"date": "  "}).date is None

    def test_empty_optional_text_is_absent(self):
        """Test "" in optional text fields means None."""
        t = build_transaction({"subArticle": "", "wallet": "", "comment": ""})
        assert t.sub_article is None
        assert t.wallet is None
        assert t.comment is None

    @pytest.mark.parametrize("text", ["05.01.2024", "2024-1-5", "20240105", "2024-13-01", "2023-02-29"])
    def test_malformed_date(self, text):
        """Test non-ISO and impossible dates are malformed records."""
        with pytest.raises(MalformedRecordError) as excinfo:
            build_transaction({"date": text})
        assert excinfo.value.field == "date"

    def test_numeric_date_is_malformed(self):
        """Test a bare number in the date field."""
        with pytest.raises(MalformedRecordError):
            build_transaction({"date": 2024.0})

    def test_corrupted_amount(self):
        """Test a non-numeric amount is a malformed record, not a string."""
        with pytest.raises(MalformedRecordError, match="must be a number") as excinfo:
            build_transaction({"amount": "abc"})
        assert excinfo.value.field == "amount"

    @pytest.mark.parametrize("text", ["inf", "nan", "1_000"])
    def test_float_spelling_amount(self, text):
        """Test float spellings that are not decimal text are malformed."""
        with pytest.raises(MalformedRecordError, match="must be a number"):
            build_transaction({"amount": text})

    def test_list_in_number_field(self):
        """Test a list where a number belongs."""
        with pytest.raises(MalformedRecordError):
            build_wallet({"initialBalance": ["1"]})

    def test_number_in_text_field(self):
        """Test a bare number where text belongs."""
        with pytest.raises(MalformedRecordError, match="must be text"):
            build_article({"name": 5.0})

    def test_text_in_list_field(self):
        """Test text where the sub-article list belongs."""
        with pytest.raises(MalformedRecordError, match="must be a list"):
            build_article({"subArticles": "Dining"})

    def test_malformed_record_is_decode_error(self):
        """Test error hierarchy."""
        with pytest.raises(DecodeError):
            build_transaction({"amount": "n/a"})

    def test_no_cross_reference_checks(self):
        """Test unknown article and wallet names are accepted."""
        t = build_transaction({"article": "Nowhere", "wallet": "Ghost", "type": "Income"})
        assert t.article == "Nowhere"
        assert t.wallet == "Ghost"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
