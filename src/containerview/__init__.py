"""Container and container-group views over a remote device inventory."""
