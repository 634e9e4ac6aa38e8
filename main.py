from src.catalog import CatalogError
from src.search_engine import (
    initialize_engine,
    format_display_results,
    format_catalog,
    filter_by_category
)

if __name__ == "__main__":
    search_engine, catalog_loader = initialize_engine()

    try:
        products = catalog_loader.get_products()
    except CatalogError as e:
        raise SystemExit(f"Could not load the catalog: {e}")

    categories = sorted({product.category for product in products})
    print(format_catalog(products))

    while True:
        user_input = input(
            "\nWhat are you looking for? ('category <name>' to browse, 'clear' to show the full catalog, 'quit' to exit): "
        ).strip()

        if user_input.lower() == 'quit':
            break

        if user_input.lower() in ('clear', 'all', 'category all'):
            print(format_catalog(products))
            continue

        if user_input.lower().startswith('category '):
            category = user_input[len('category '):].strip()
            print(format_catalog(filter_by_category(products, category)))
            print(f"\nCategories: {', '.join(categories)}")
            continue

        if not user_input:
            print("Please enter a search query.")
            continue

        outcome = search_engine.search(user_input, products)
        print(format_display_results(outcome))

        if not outcome.results:
            print("\nTry searching by product type, a price limit such as 'under $100', or 'good reviews'.")
