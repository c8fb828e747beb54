from .inventory_store import InventoryStore as InventoryStore
