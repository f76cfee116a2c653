"""
Centralized client initialization module.

Handlers call these lazy getters once per container and pass the results
into services explicitly.
"""
from src.utils.dynamo import get_dynamo
from src.services.insights import InsightGenerator
from src.services.storage import ProfileRepository, CycleLogRepository

# Initialize shared clients (lazy loading)
_profiles = None
_entries = None
_insights = None

def get_profiles() -> ProfileRepository:
    """Get or create the profile repository."""
    global _profiles
    if _profiles is None:
        _profiles = ProfileRepository(get_dynamo())
    return _profiles

def get_entries() -> CycleLogRepository:
    """Get or create the log entry repository."""
    global _entries
    if _entries is None:
        _entries = CycleLogRepository(get_dynamo())
    return _entries

def get_insight_generator() -> InsightGenerator:
    """Get or create the insight generator."""
    global _insights
    if _insights is None:
        _insights = InsightGenerator()
    return _insights
