"""Command line interface for ledgerbatch."""
