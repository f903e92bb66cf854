"""
Comparing Match Strategies

This example runs the same query with different strategies switched on:
- Simple: normalized text only
- Lemma: also verses sharing the query's lemma
- Root: also verses sharing the query's root
- Fuzzy: also verses within a few edits of the query
"""

import time

from quran_search import QuranSearchEngine, SearchOptions
from quran_search.data import load_context


STRATEGIES = {
    "simple": SearchOptions(lemma=False, root=False, fuzzy=False),
    "lemma": SearchOptions(root=False, fuzzy=False),
    "root": SearchOptions(fuzzy=False),
    "all": SearchOptions(),
}


def search_with(engine, query, name, options):
    """Search with one set of strategies and measure time."""
    start_time = time.time()
    response = engine.search(query, options)
    elapsed = time.time() - start_time

    counts = response.counts
    print(f"{name:8s} {counts.total:6d} {counts.simple:7d} {counts.lemma:6d} "
          f"{counts.root:5d} {counts.fuzzy:6d} {elapsed * 1000:8.1f}ms")
    return response


def main():
    query = "كتب"
    context = load_context("data")
    # no cache, so every run is timed from scratch
    engine = QuranSearchEngine(context, cache_capacity=0)

    print(f"Query: {query}")
    print(f"{'strategy':8s} {'total':>6s} {'simple':>7s} {'lemma':>6s} {'root':>5s} {'fuzzy':>6s} {'time':>10s}")
    print("-" * 60)

    for name, options in STRATEGIES.items():
        search_with(engine, query, name, options)


if __name__ == "__main__":
    main()
