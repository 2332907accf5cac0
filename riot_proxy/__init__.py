"""riot-proxy: Riot ID and ranked standing lookups behind a small HTTP API."""

__version__ = "1.0.0"
