"""Helpers shared by scriptfold CLI commands."""
