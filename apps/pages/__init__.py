"""Pages app: catalog pages, the sidebar slot registry, debug routes and health check."""
