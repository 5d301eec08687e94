"""Business logic services over the entity store."""
