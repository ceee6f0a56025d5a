"""
Alpha Hunter - Usage Examples
=============================
This file demonstrates how to use Alpha Hunter both programmatically
and via the API.
"""

SAMPLE_CSV = """\ufeffProje_Adı,Website_URL,Kategori_Etiketler,Lansman_Tarihi_Durumu,Ham_Açıklama,Potansiyel_Skoru,Analist_Notu
Nebula Quest,nebulaquest.gg,"GameFi,NFT",Upcoming Q3,"On-chain RPG, ""play-to-own"" items",9,Strong team
GridPower,https://gridpower.network,"DePIN, AI",In Development,Decentralized energy sensors,8.5,Early testnet
SwapLite,swaplite.fi,DeFi,Live,AMM on L2,6.5,Crowded market
MetaMall,metamall.io,Metaverse,2025-Q4,Virtual shopping district,7,Watch
OldChain,N/A,Other,Abandoned,Inactive,3,Skip
"""


# =============================================================================
# EXAMPLE 1: Direct Engine Usage (Programmatic)
# =============================================================================

def example_direct_usage():
    """Use the engine directly in Python code"""
    from alpha_hunter.engine import AlphaHuntingEngine

    engine = AlphaHuntingEngine()

    print("=" * 60)
    print("ANALYZING SAMPLE SPREADSHEET")
    print("=" * 60)

    projects = engine.parse(SAMPLE_CSV)
    print(f"\nParsed {len(projects)} projects")

    result = engine.analyze(projects)
    stats = result.summary_statistics

    print("\n--- Summary ---")
    print(f"  Passed filters:   {stats.total_projects}")
    print(f"  Average score:    {stats.average_potential_score}")
    print(f"  High potential:   {stats.high_potential_projects}")
    print(f"  Medium potential: {stats.medium_potential_projects}")
    print(f"  Upcoming:         {stats.upcoming_projects}")

    print("\n--- Prioritized Projects ---")
    for i, p in enumerate(result.prioritized_projects, 1):
        print(f"  {i}. {p.project_name}: {p.priority_score:.2f} ({p.launch_status}, {p.category_tags})")

    print("\n--- Top Categories ---")
    for bucket in result.category_analysis:
        print(f"  {bucket.label}: {bucket.value}")

    print("\n--- Score Distribution ---")
    for bucket in result.potential_score_distribution:
        print(f"  {bucket.label}: {bucket.value}")

    return result


# =============================================================================
# EXAMPLE 2: Custom Hunt Configuration
# =============================================================================

def example_custom_config():
    """Create a custom hunt configuration"""
    from alpha_hunter.engine import AlphaHuntingEngine
    from alpha_hunter.models.hunt_config import (
        HuntConfig,
        FilterConfig,
        ScoringConfig,
        PriorityWeights,
        AnalysisLimits,
    )

    config = HuntConfig(
        name="GameFi only",
        description="Strict hunt for game projects",
        filters=FilterConfig(
            min_potential_score=7,
            target_categories=["GameFi"],
        ),
        scoring=ScoringConfig(
            weights=PriorityWeights(potential=0.6, launch=0.2, category=0.2),
        ),
        limits=AnalysisLimits(top_projects=5),
    )

    engine = AlphaHuntingEngine(config=config)
    result = engine.analyze(engine.parse(SAMPLE_CSV))

    print("=" * 60)
    print("CUSTOM HUNT CONFIGURATION")
    print("=" * 60)
    print(f"Config Name: {config.name}")
    print(f"Weights: {config.scoring.weights}")
    print(f"Shortlist: {[p.project_name for p in result.prioritized_projects]}")

    return engine


# =============================================================================
# EXAMPLE 3: Verification and Export
# =============================================================================

def example_verification_and_export():
    """Verify the top project (needs OPENROUTER_API_KEY) and export CSV"""
    import asyncio
    import os
    from alpha_hunter.engine import AlphaHuntingEngine

    engine = AlphaHuntingEngine(llm_api_key=os.getenv("OPENROUTER_API_KEY"))
    result = engine.analyze(engine.parse(SAMPLE_CSV))
    shortlist = result.prioritized_projects

    print("=" * 60)
    print("VERIFICATION & EXPORT")
    print("=" * 60)

    if engine.verifier.is_configured and shortlist:
        verified = asyncio.run(engine.verify_project(shortlist[0]))
        print(f"{verified.project_name}: {verified.verification_status.value}")
        print(f"  Confidence: {verified.verification_score}")
        print(f"  Summary: {verified.verification_summary}")
        shortlist = [verified] + shortlist[1:]
    else:
        print("Skipping verification (set OPENROUTER_API_KEY to enable)")

    print("\nCSV export:")
    print(engine.export_csv(shortlist))


# =============================================================================
# EXAMPLE 4: API Usage with requests
# =============================================================================

def example_api_usage():
    """Use the API via HTTP requests"""
    import requests

    BASE_URL = "http://localhost:8000"

    print("=" * 60)
    print("API USAGE EXAMPLE")
    print("=" * 60)
    print("Make sure the server is running: python main.py")
    print()

    payload = {"csv_text": SAMPLE_CSV}

    print("Request payload:")
    print(f"  POST {BASE_URL}/api/analyze")
    print(f"  {payload}")

    # Uncomment to actually make the request:
    # response = requests.post(f"{BASE_URL}/api/analyze", json=payload)
    # print(f"\nResponse: {response.json()}")


# =============================================================================
# MAIN
# =============================================================================

if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("ALPHA HUNTER - USAGE EXAMPLES")
    print("=" * 60 + "\n")

    print("\n[Example 1: Direct Usage]")
    example_direct_usage()

    print("\n" + "-" * 60)
    print("\n[Example 2: Custom Configuration]")
    example_custom_config()

    print("\n" + "-" * 60)
    print("\n[Example 3: Verification and Export]")
    example_verification_and_export()

    print("\n" + "-" * 60)
    print("\n[Example 4: API Usage]")
    example_api_usage()

    print("\n" + "=" * 60)
    print("EXAMPLES COMPLETE")
    print("=" * 60)
