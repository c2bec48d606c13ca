"""Console menu driver for the address book."""
