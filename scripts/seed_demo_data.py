"""Load the demo warehouses and items into the ledger.

Skips loading when the ledger already holds warehouses. With the default
memory provider the data only lives for the duration of this process, so
this is mostly useful against PostgreSQL:

Usage:
    PROTEAN_ENV=production DATABASE_URL=postgresql://... python scripts/seed_demo_data.py
    python scripts/seed_demo_data.py --summary    # also print the dashboard totals
"""

import argparse
import sys

# Add src/ to path so we can import domain modules
sys.path.insert(0, "src")


def main():
    parser = argparse.ArgumentParser(description="Load demo warehouses and items")
    parser.add_argument("--summary", action="store_true", help="Print dashboard totals after loading")
    args = parser.parse_args()

    from ledger.domain import ledger
    from ledger.reporting.dashboard import summarize
    from ledger.utils.logging import configure_logging
    from ledger.utils.seed import seed_demo_data

    configure_logging()
    ledger.init()

    with ledger.domain_context():
        loaded = seed_demo_data()
        print("Demo data loaded." if loaded else "Ledger already contains data. Skipping.")

        if args.summary:
            summary = summarize()
            print(f"\n{'='*60}")
            print("  Ledger Summary")
            print(f"{'='*60}")
            print(f"  Warehouses:          {summary.total_warehouses:,}")
            print(f"  Items:               {summary.total_items:,}")
            print(f"  Units in stock:      {summary.total_quantity:,}")
            print(f"  Overall utilization: {summary.overall_utilization:.1f}%")
            for category, quantity in sorted(summary.quantity_by_category.items()):
                print(f"    {category:<20} {quantity:>8,}")
            print(f"{'='*60}\n")


if __name__ == "__main__":
    main()
