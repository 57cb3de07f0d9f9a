"""Configuration, logging, date and schedule-loading helpers for the whip CLI."""
