"""Pure calculation layer: no I/O, no configuration, no hidden defaults."""
