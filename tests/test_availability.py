from prism_picker.availability import filter_loadable


def test_filter_keeps_catalog_order():
    catalog = ["c", "a", "d", "b"]
    assert filter_loadable(catalog, lambda t: t in {"a", "b", "c"}) == ["c", "a", "b"]


def test_filter_keeps_duplicates():
    assert filter_loadable(["x", "y", "x"], lambda t: t == "x") == ["x", "x"]


def test_filter_empty_when_nothing_loadable():
    assert filter_loadable(["x", "y"], lambda t: False) == []
    assert filter_loadable([], lambda t: True) == []


def test_filter_calls_oracle_once_per_entry():
    seen = []

    def oracle(theme):
        seen.append(theme)
        return True

    filter_loadable(("a", "b"), oracle)
    assert seen == ["a", "b"]
