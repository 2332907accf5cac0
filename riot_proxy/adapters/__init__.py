"""Adapters layer for riot-proxy.

This layer contains the Riot API client and the aiohttp HTTP shell.
"""
