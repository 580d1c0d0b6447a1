from src.codeowners.engine import OwnershipEngine

# --- Service Dependencies ---  # DI: swap for a fixture-built engine in tests.

ownership_engine = OwnershipEngine()


def get_ownership_engine() -> OwnershipEngine:
    """
    Injects the process-wide OwnershipEngine.
    """
    return ownership_engine
