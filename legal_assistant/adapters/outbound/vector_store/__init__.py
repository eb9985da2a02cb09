"""Vector store adapters."""

from .qdrant_adapter import QdrantAdapter
from .supabase_adapter import SupabaseAdapter

__all__ = ["QdrantAdapter", "SupabaseAdapter"]
