"""Domain layer - the storage engine and the types it stores."""
