"""Platform services shared by the core modules."""
