"""기준 사전 CSV 적재 테스트"""
import pytest

from catalog_matcher.core.exceptions import DictionaryFormatException, DictionaryNotFoundException
from catalog_matcher.repositories import load_dictionary, parse_dictionary_rows
from catalog_matcher.repositories.dictionary_repository import resolve_columns


class TestLoadDictionary:
    """CSV 파일 로드"""

    def test_basic_file(self, dictionary_csv):
        path = dictionary_csv(
            "product,brand,category\n"
            "iPhone 13 Pro 128GB,Apple,Smartphones\n"
            "Galaxy S21 Ultra,Samsung,Smartphones\n"
        )
        dictionary = load_dictionary(path)

        assert len(dictionary) == 2
        entry = dictionary[0]
        assert (entry.product, entry.brand, entry.category) == ("iPhone 13 Pro 128GB", "Apple", "Smartphones")
        assert entry.norm_product == "iphone 13 pro"
        assert entry.token_len == 3

    def test_columns_located_by_header_name(self, dictionary_csv):
        path = dictionary_csv("Category,Brand,Product\nLaptops,Apple,MacBook Air M1\n")
        entry = load_dictionary(path)[0]
        assert (entry.product, entry.brand, entry.category) == ("MacBook Air M1", "Apple", "Laptops")

    def test_unknown_header_uses_positions(self, dictionary_csv):
        path = dictionary_csv("name,maker,group\nMacBook Air M1,Apple,Laptops\n")
        entry = load_dictionary(path)[0]
        assert (entry.product, entry.brand, entry.category) == ("MacBook Air M1", "Apple", "Laptops")

    def test_short_and_blank_rows_are_dropped(self, dictionary_csv):
        path = dictionary_csv(
            "product,brand,category\n"
            "Galaxy S21 Ultra,Samsung\n"
            ",Apple,Laptops\n"
            "MacBook Air M1,Apple,Laptops\n"
        )
        dictionary = load_dictionary(path)
        assert [e.product for e in dictionary] == ["MacBook Air M1"]

    def test_empty_brand_and_category_are_kept(self, dictionary_csv):
        path = dictionary_csv("product,brand,category\nPixel 8 Pro,,\n")
        entry = load_dictionary(path)[0]
        assert (entry.brand, entry.category) == ("", "")

    def test_quoted_fields_and_bom(self, dictionary_csv):
        path = dictionary_csv('\ufeffproduct,brand,category\n"Galaxy S21 Ultra, 5G",Samsung,Smartphones\n')
        entry = load_dictionary(path)[0]
        assert entry.product == "Galaxy S21 Ultra, 5G"
        assert entry.norm_product == "galaxy s21 ultra 5g"

    def test_header_only(self, dictionary_csv):
        assert len(load_dictionary(dictionary_csv("product,brand,category\n"))) == 0

    def test_empty_file(self, dictionary_csv):
        assert len(load_dictionary(dictionary_csv(""))) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryNotFoundException) as exc_info:
            load_dictionary(str(tmp_path / "missing.csv"))
        assert exc_info.value.error_code == "DICTIONARY_NOT_FOUND"

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "broken.csv"
        path.write_bytes(b"product,brand,category\n\xff\xfe\xfa,Apple,Laptops\n")
        with pytest.raises(DictionaryFormatException):
            load_dictionary(str(path))


class TestParseRows:
    def test_returns_dropped_count(self):
        dictionary, dropped = parse_dictionary_rows([
            ["product", "brand", "category"],
            ["Galaxy S21 Ultra", "Samsung", "Smartphones", "extra"],
            ["too short"],
        ])
        assert len(dictionary) == 1
        assert dropped == 1

    def test_no_records(self):
        dictionary, dropped = parse_dictionary_rows([])
        assert (len(dictionary), dropped) == (0, 0)

    def test_resolve_columns_mixed(self):
        assert resolve_columns(["id", "PRODUCT", "Category"]) == (1, 1, 2)
