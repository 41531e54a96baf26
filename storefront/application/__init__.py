"""Application layer: DTOs, ports and the render / checkout services.

Depends only on domain and protocol definitions. Infrastructure implements
the ports (repositories, caches, storage, remote clients).
"""
