"""Prompt templates for ATS Checker."""
