"""Pipeline building blocks: configuration, download, storage and orchestration."""
