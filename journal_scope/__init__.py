"""Journal scope selection engine and its adapters."""
