"""Shared utilities: cache, logging, timezones, JSONP decoding."""
