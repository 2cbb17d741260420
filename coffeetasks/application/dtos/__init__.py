"""DTOs for application use cases (no dependency on the store's wire format)."""
