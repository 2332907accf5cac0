"""Mock Riot API server and control client for local runs and tests."""
