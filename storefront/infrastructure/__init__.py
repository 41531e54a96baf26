"""Infrastructure: cache tiers, persistence, object storage and remote clients."""
