"""Core domain types and pure page logic."""
