"""
Tests for the shared pagination helpers.
"""
import pytest
from sqlmodel import Session, select

from brandsbridge.models import Product
from brandsbridge.services.query import build_meta, page_window, paginate


@pytest.mark.parametrize(
    "total, limit, pages",
    [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2), (25, 10, 3)],
)
def test_total_pages(total, limit, pages):
    assert build_meta(total, 1, limit).total_pages == pages


def test_page_window():
    assert page_window(1, 20) == (0, 20)
    assert page_window(3, 10) == (20, 10)


def test_paginate_covers_every_row_once(session: Session, make_product):
    for i in range(7):
        make_product(name=f"P{i}", slug=f"p{i}")

    stmt = select(Product).order_by(Product.sort_order, Product.id)
    seen = []
    page = 1
    while True:
        rows, meta = paginate(session, stmt, page, 3)
        assert meta.total == 7
        assert len(rows) <= 3
        if not rows:
            break
        seen.extend(row.slug for row in rows)
        page += 1

    assert seen == [f"p{i}" for i in range(7)]
    assert page - 1 == meta.total_pages


def test_page_past_the_end_is_empty(session: Session, make_product):
    make_product()

    rows, meta = paginate(session, select(Product), 5, 10)
    assert rows == []
    assert meta.total == 1
