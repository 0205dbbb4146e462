from src.party_planner.seed.loader import load_seed_records, seed_catalog

__all__ = ["load_seed_records", "seed_catalog"]
