import pytest

from favfilms.domain.entities.catalog_page import CatalogPage


@pytest.mark.parametrize(
    "page,n_items,total,expected",
    [
        (1, 10, 25, True),
        (3, 5, 25, False),
        (2, 10, 20, False),
        (4, 0, 25, False),
        (1, 0, 0, False),
    ],
)
def test_has_more_is_exact(page, n_items, total, expected):
    p = CatalogPage(items=list(range(n_items)), page=page, page_size=10, total=total)
    assert p.has_more is expected
    assert p.offset == (page - 1) * 10


@pytest.mark.parametrize("kw", [{"page": 0}, {"page_size": 0}])
def test_rejects_bad_bounds(kw):
    with pytest.raises(ValueError):
        CatalogPage(**kw)
