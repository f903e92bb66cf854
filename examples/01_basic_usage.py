"""
Basic Usage Example for quran-search-engine

This example demonstrates the simplest way to search the Quran:
1. Load the datasets
2. Search for a word
3. Page through the results
4. Highlight the matched words
"""

from quran_search import QuranSearchEngine, Pagination
from quran_search.data import load_context


def main():
    query = "الرحمن"

    # Step 1: Load verses, morphology and the word map
    print("Step 1: Loading datasets...")
    context = load_context("data")
    print(f"  Loaded {len(context)} verses\n")

    engine = QuranSearchEngine(context)

    # Step 2: Search (simple, lemma, root and fuzzy are all on by default)
    print(f"Step 2: Searching for {query}...")
    response = engine.search(query, pagination=Pagination(limit=10))
    print(f"  Lemma: {response.lemma}  Root: {response.root}")
    print(f"  {response.counts.total} verses matched "
          f"(simple {response.counts.simple}, lemma {response.counts.lemma}, "
          f"root {response.counts.root}, fuzzy {response.counts.fuzzy})\n")

    # Step 3: Display the first page
    info = response.pagination
    print(f"Results (page {info.current_page} of {info.total_pages}):")
    print("-" * 80)
    for verse in response.results:
        print(f"{verse.sura_name} {verse.aya_id_display:>4}  "
              f"[{verse.match_type.value:6s} {verse.match_score:.2f}]  {verse.standard}")

    # Step 4: Highlight the matched words of the best result
    if response.results:
        best = response.results[0]
        print("\nHighlighted words in the best result:")
        for r in engine.highlight(best):
            print(f"  {best.uthmani[r.start:r.end]} ({r.match_type.value})")


if __name__ == "__main__":
    main()
