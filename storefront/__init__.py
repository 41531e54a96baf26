"""Multi-tenant storefront renderer."""
