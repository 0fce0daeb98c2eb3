from typing import get_type_hints

from app.models.category import Category
from app.models.product import Product
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository


class TestRepositoryNames:
    """Listing methods must not shadow the builtin `list` inside the class."""

    def test_product_repository(self):
        assert "list" not in vars(ProductRepository)
        assert get_type_hints(ProductRepository.list_all)["return"] == list[Product]
        assert get_type_hints(ProductRepository.list_featured)["return"] == list[Product]

    def test_category_repository(self):
        assert "list" not in vars(CategoryRepository)
        assert get_type_hints(CategoryRepository.list_all)["return"] == list[Category]


def test_list_all_filters_by_category(session, make_category, make_product):
    keep = make_category("Keep")
    drop = make_category("Drop")
    make_product(keep, name="kept")
    make_product(drop, name="dropped")

    products = ProductRepository().list_all(session, category_ids=[keep.id])

    assert [p.name for p in products] == ["kept"]


def test_list_all_with_empty_filter_matches_nothing(session, make_category, make_product):
    make_product(make_category())

    assert ProductRepository().list_all(session, category_ids=[]) == []


def test_category_list_all_is_ordered_by_name(session, make_category):
    make_category("Shoes")
    make_category("Hats")

    names = [c.name for c in CategoryRepository().list_all(session)]

    assert names == ["Hats", "Shoes"]
