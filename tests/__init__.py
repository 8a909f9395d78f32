"""Tests for airpods-pro."""
