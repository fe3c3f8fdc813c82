import time

import pytest

from name_resolution_engine.matchers.catalog_matcher import CatalogEntry, CatalogMatcher


@pytest.mark.performance
def test_catalog_matcher_perf_smoke():
    matcher = CatalogMatcher(
        [
            CatalogEntry(
                f"Institution Number {idx}",
                (f"Inst {idx}", f"INU {idx}"),
                payload=f"logos/{idx}.png",
            )
            for idx in range(1000)
        ]
    )
    # misspellings never hit the structural stages, so every query runs the fuzzy scan
    queries = [f"Instituton Numbr {idx}" for idx in range(100)]

    start = time.perf_counter()
    results = matcher.resolve_many(queries)
    duration = time.perf_counter() - start

    assert all(match is not None for _, match in results)
    assert duration < 5.0
