from .in_memory_inventory_store import InMemoryInventoryStore as InMemoryInventoryStore
