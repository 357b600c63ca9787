"""Normalization service for nested device telemetry payloads."""
