"""
Tests for goods filters, search and random top selection.
"""

from collections import Counter

from inspired.services import goods_filters as filters


def _ids(items):
    return [item["id"] for item in items]


def test_shuffle_returns_copy_with_same_items():
    items = [{"id": str(i)} for i in range(10)]
    shuffled = filters.shuffle(items)
    assert shuffled is not items
    assert sorted(_ids(shuffled), key=int) == _ids(items)
    assert _ids(items) == [str(i) for i in range(10)]


def test_shuffle_reaches_every_permutation():
    items = [{"id": "a"}, {"id": "b"}, {"id": "c"}]
    seen = Counter(tuple(_ids(filters.shuffle(items))) for _ in range(3000))
    assert len(seen) == 6
    # uniform: each of the 6 orderings expected ~500 times
    assert min(seen.values()) > 350


def test_select_top_picks_exactly_eight(top_catalog):
    picked = filters.select_top(top_catalog.goods, "women")
    assert len(picked) == 8
    assert len(set(_ids(picked))) == 8
    assert all(item["gender"] == "women" and item["top"] for item in picked)


def test_select_top_order_varies(top_catalog):
    orders = {tuple(_ids(filters.select_top(top_catalog.goods, "women"))) for _ in range(50)}
    assert len(orders) > 1


def test_select_top_pads_short_selection_with_none(catalog):
    picked = filters.select_top(catalog.goods, "women")
    assert len(picked) == 8
    real = [item for item in picked if item is not None]
    assert sorted(_ids(real)) == ["1", "11", "3", "8"]
    assert picked[len(real):] == [None] * (8 - len(real))


def test_select_top_skips_non_top_goods(catalog):
    picked = [item for item in filters.select_top(catalog.goods, "men") if item]
    assert sorted(_ids(picked)) == ["5", "6", "7"]


def test_exact_match_filters(catalog):
    goods = list(catalog.goods)
    assert _ids(filters.filter_by_gender(goods, "men")) == ["2", "5", "6", "7", "10"]
    assert _ids(filters.filter_by_category(goods, "dress")) == ["1", "2", "11"]
    assert _ids(filters.filter_by_type(goods, "tshirt")) == ["4", "6"]
    assert filters.filter_by_gender(goods, None) is goods


def test_search_is_case_insensitive_over_title_and_description(catalog):
    assert _ids(filters.search_goods(catalog.goods, "  ShIrT ")) == ["3", "4", "5", "6"]
    assert _ids(filters.search_goods(catalog.goods, "linen")) == ["1"]
    assert filters.search_goods(catalog.goods, "velvet") == []


def test_search_tolerates_missing_text_fields():
    goods = [{"id": "1"}, {"id": "2", "title": "Shirt"}]
    assert _ids(filters.search_goods(goods, "shirt")) == ["2"]


def test_id_list_keeps_catalog_order(catalog):
    assert _ids(filters.filter_by_id_list(catalog.goods, "7,3")) == ["3", "7"]


def test_id_list_matches_by_substring(catalog):
    # "11" contains "1" as well, so both come back
    assert _ids(filters.filter_by_id_list(catalog.goods, "11")) == ["1", "11"]
