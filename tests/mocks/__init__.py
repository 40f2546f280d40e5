"""Test doubles for the escape room engine."""
