from core.queries import list_products, list_warehouses
from db.seed import SEED_PRODUCTS, SEED_WAREHOUSES


def _ids(page):
    return [p.id for p in page.items]


class TestListProductsNoFilters:
    def test_returns_everything_in_insertion_order(self, store):
        page = list_products(store)
        assert page.total == len(SEED_PRODUCTS)
        assert _ids(page) == [row[0] for row in SEED_PRODUCTS]

    def test_page_info_on_first_page(self, store):
        page = list_products(store)
        assert page.page_info.has_previous_page is False
        assert page.page_info.has_next_page is False

    def test_items_are_joined_with_warehouse_and_status(self, store):
        first = list_products(store).items[0]
        assert first.warehouse.id == "BLR-A"
        assert first.warehouse.name == "Bangalore Warehouse A"
        assert first.status == "healthy"

    def test_listing_does_not_mutate_store(self, store):
        before = [(p.id, p.warehouse_id, p.stock, p.demand) for p in store.products()]
        list_products(store, search="steel", status="critical", page=1, limit=1)
        after = [(p.id, p.warehouse_id, p.stock, p.demand) for p in store.products()]
        assert before == after


class TestListProductsFilters:
    def test_search_matches_name(self, store):
        page = list_products(store, search="bolt")
        assert [p.name for p in page.items] == ["12mm Hex Bolt"]
        assert page.total == 1

    def test_search_is_case_insensitive_and_matches_sku(self, store):
        page = list_products(store, search="wsr-08")
        assert _ids(page) == ["P-1002"]

    def test_search_or_semantics_over_name_and_sku(self, store):
        # "steel" appears in two names
        page = list_products(store, search="STEEL")
        assert _ids(page) == ["P-1002", "P-1005"]

    def test_warehouse_filter(self, store):
        page = list_products(store, warehouse_id="BLR-A")
        assert _ids(page) == ["P-1001", "P-1002"]

    def test_status_filter_critical(self, store):
        page = list_products(store, status="critical")
        assert _ids(page) == ["P-1002", "P-1004", "P-1006"]
        assert all(p.stock < p.demand for p in page.items)

    def test_status_filter_low(self, store):
        page = list_products(store, status="low")
        assert _ids(page) == ["P-1003"]

    def test_filters_combine(self, store):
        page = list_products(store, search="steel", warehouse_id="BLR-A", status="critical")
        assert _ids(page) == ["P-1002"]

    def test_unknown_status_yields_empty(self, store):
        page = list_products(store, status="unknown")
        assert page.items == []
        assert page.total == 0

    def test_unknown_warehouse_yields_empty(self, store):
        assert list_products(store, warehouse_id="NOPE").total == 0

    def test_empty_string_filters_are_ignored(self, store):
        page = list_products(store, search="", warehouse_id="", status="")
        assert page.total == len(SEED_PRODUCTS)

    def test_status_filter_uses_current_values(self, store):
        store.get_product("P-1002").demand = 10
        assert "P-1002" not in _ids(list_products(store, status="critical"))
        assert "P-1002" in _ids(list_products(store, status="healthy"))


class TestListProductsPagination:
    def test_pages_partition_the_result(self, store):
        seen = []
        for offset in (0, 2, 4):
            page = list_products(store, page=offset, limit=2)
            assert page.total == 6
            assert len(page.items) == 2
            seen.extend(_ids(page))
        assert seen == [row[0] for row in SEED_PRODUCTS]

    def test_has_next_page_tracks_offset_plus_limit(self, store):
        assert list_products(store, page=0, limit=2).page_info.has_next_page is True
        assert list_products(store, page=2, limit=2).page_info.has_next_page is True
        assert list_products(store, page=4, limit=2).page_info.has_next_page is False

    def test_has_previous_page(self, store):
        assert list_products(store, page=0, limit=2).page_info.has_previous_page is False
        assert list_products(store, page=2, limit=2).page_info.has_previous_page is True

    def test_page_is_an_offset_not_an_index(self, store):
        page = list_products(store, page=1, limit=2)
        assert _ids(page) == ["P-1002", "P-1003"]

    def test_offset_past_end_is_empty(self, store):
        page = list_products(store, page=10, limit=2)
        assert page.items == []
        assert page.total == 6
        assert page.page_info.has_previous_page is True

    def test_slice_is_clamped(self, store):
        page = list_products(store, page=5, limit=10)
        assert _ids(page) == ["P-1006"]

    def test_total_counts_after_filtering(self, store):
        page = list_products(store, status="critical", page=0, limit=1)
        assert page.total == 3
        assert len(page.items) == 1
        assert page.page_info.has_next_page is True


class TestListWarehouses:
    def test_returns_seed_warehouses(self, store):
        assert [w.id for w in list_warehouses(store)] == [w.id for w in SEED_WAREHOUSES]
