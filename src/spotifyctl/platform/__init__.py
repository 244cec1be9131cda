"""Platform adapters: logging and the D-Bus transport."""
