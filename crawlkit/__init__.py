"""Web crawler components: module IDs, a load-balancing registrar, a downloader, an analyzer and an item pipeline."""

__version__ = "0.1.0"