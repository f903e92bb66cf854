"""
Advanced Configuration Example

This example demonstrates advanced usage:
- Custom configuration settings
- Structural filters (sura, juz, sura name)
- Explaining an empty filtered search
- Highlighting by lemma or root
"""

from quran_search import HighlightMode, QuranSearchEngine, SearchOptions, configure
from quran_search.data import load_context


def main():
    print("Advanced quran-search-engine Configuration Example")
    print("=" * 80)

    # Step 1: Configure global settings
    print("\nStep 1: Configuring...")
    settings = configure(
        data_dir="data",
        cache_capacity=256,
        default_page_size=5,
        fuzzy_max_edits=1,
    )
    engine = QuranSearchEngine(load_context(settings=settings), settings)
    print("  Configuration complete")

    # Step 2: Search inside one sura by name
    print("\nStep 2: Searching inside Al-Baqarah...")
    response = engine.search("الصلاة", SearchOptions(sura_name="Al-Baqarah"))
    print(f"  {response.pagination.total_results} verses in {response.pagination.total_pages} pages")

    # Step 3: A conflicting filter and its explanation
    print("\nStep 3: Conflicting filters...")
    options = SearchOptions(sura_name="البقرة", sura_id=3)
    response = engine.search("الصلاة", options)
    if response.is_empty:
        report = engine.diagnose("الصلاة", options)
        print(f"  {report.kind.value}: {report.message}")

    # Step 4: Highlight a verse by root
    print("\nStep 4: Root highlighting...")
    response = engine.search("يعلمون", SearchOptions(fuzzy=False))
    for verse in response.results[:3]:
        tokens = engine.positive_tokens(verse, HighlightMode.ROOT, response.query, root=response.root)
        print(f"  {verse.sura_id}:{verse.aya_id}  {' | '.join(tokens)}")


if __name__ == "__main__":
    main()
