"""Tests for the wildfire simulation."""
