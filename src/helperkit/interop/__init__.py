"""Platform interop helpers."""
