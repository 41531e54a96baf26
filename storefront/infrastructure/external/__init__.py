"""External systems: object storage, CDN and platform microservices."""
