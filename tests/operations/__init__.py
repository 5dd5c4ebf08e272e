"""Test suite for the operations module."""
