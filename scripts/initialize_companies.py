"""Seed the requirement cache with the default companies.

Stores the bundled static profiles for Microsoft, Google, Amazon and Meta,
overwriting any cached copies. Companies missing from the static data are
generated with the profile model.

Usage:
    python scripts/initialize_companies.py [--data <path>] [--ai-only]

Examples:
    # Refresh defaults from the bundled JSON
    python scripts/initialize_companies.py

    # Regenerate every default company with the model
    python scripts/initialize_companies.py --ai-only
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

# Ensure dsa_tracker is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


async def run_initialization(data_path: str | None, ai_only: bool) -> int:
    from dsa_tracker.chains.generate_company_profile import AnthropicProfileGenerator
    from dsa_tracker.core.company_profiles import (
        DEFAULT_COMPANY_DATA,
        CompanyProfileService,
        load_default_company_data,
    )
    from dsa_tracker.db.company_requirements import SupabaseProfileStore

    print(f"\n{'='*60}")
    print("Initializing default company requirements")
    print(f"{'='*60}\n")

    static_data = None
    if not ai_only:
        static_data = load_default_company_data(Path(data_path) if data_path else DEFAULT_COMPANY_DATA)

    service = CompanyProfileService(
        store=SupabaseProfileStore(),
        generator=AnthropicProfileGenerator(),
    )
    results = await service.initialize_defaults(static_data)

    failed = 0
    for result in results:
        marker = "OK " if result["status"] == "updated" else "ERR"
        print(f"  [{marker}] {result['company']}: {result['status']}")
        if "error" in result:
            failed += 1
            print(f"        {result['error']}")

    print(f"\n{'='*60}")
    return 1 if failed else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed cached requirements for default companies.")
    parser.add_argument("--data", metavar="PATH", help="Static profile JSON (defaults to bundled data)")
    parser.add_argument("--ai-only", action="store_true", help="Ignore static data and generate every profile")

    args = parser.parse_args()

    sys.exit(asyncio.run(run_initialization(data_path=args.data, ai_only=args.ai_only)))


if __name__ == "__main__":
    main()
