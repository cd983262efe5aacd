"""Export conversion pipeline and command-line interface."""
